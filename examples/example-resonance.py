# example script plotting the heave, roll and pitch amplitude curves of a supply vessel

import numpy as np
import matplotlib.pyplot as plt
import seakeeping
import os
import os.path as path

# load the vessel description and compute its natural periods and relative damping ratios
flNm = 'supply'
current_dir = os.path.dirname(os.path.abspath(__file__))
flPath = path.join(current_dir, '..', 'designs', flNm + '.yaml')

vessel = seakeeping.loadVessel(flPath)
T, zeta = vessel.naturalPeriods(display=1)

# amplitude curves for wr = w_e / w_n from 0 to 2.5
wr = np.arange(0, 2.5+0.005, 0.01)
wn, curves = seakeeping.impedanceCurvesFromPeriods(T, zeta, wr=wr)

seakeeping.plotImpedanceCurves(wr, curves, wn, zeta[2:5])
plt.show()
