# Standalone runs of the resonance curves and the closed-form wave response

import os
import sys
import numpy as np
import matplotlib.pyplot as plt

import seakeeping
from seakeeping.helpers import deg2rad

seakeeping_dir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))


def runResonance(fname_vessel, display=0):
    '''
    Plots the amplitude curves 1/Zm against the frequency ratio w_e/w_n for heave, roll
    (nominal and doubled damping) and pitch, using the natural periods and damping ratios
    of the vessel described in the specified YAML file.
    '''

    vessel = seakeeping.loadVessel(fname_vessel)

    print("Loading file: "+fname_vessel)
    print(f"'{vessel.name}'")

    T, zeta = vessel.naturalPeriods(display=display)

    wr = np.arange(0, 2.5+0.005, 0.01)   # wr = w_e / w_n
    wn, curves = seakeeping.impedanceCurvesFromPeriods(T, zeta, wr=wr)

    fig, ax = seakeeping.plotImpedanceCurves(wr, curves, wn, [zeta[2], zeta[3], zeta[4]])

    return curves, fig


def runWaveResponse(a=2, beta=45*deg2rad, T_0=10, U=5, L=82.8, B=19.2, T=6, ship=None, display=1):
    '''
    Plots the steady-state heave, roll and pitch responses for 20 seconds.
    The defaults are the example waveResponse345(2, 45*pi/180, 10, 5, 82.8, 19.2, 6).
    '''

    t, z, phi, theta = seakeeping.waveResponse345(a, beta, T_0, U, L, B, T, ship=ship, display=display)

    fig, ax = seakeeping.plotWaveResponse(t, z, phi, theta, a, beta)

    return (t, z, phi, theta), fig


if __name__ == "__main__":

    if len(sys.argv) > 1:
        fname_vessel = sys.argv[1]
    else:
        fname_vessel = os.path.join(seakeeping_dir, 'designs', 'supply.yaml')

    runResonance(fname_vessel, display=1)

    runWaveResponse()

    plt.show()
