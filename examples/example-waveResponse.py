# example script computing the steady-state heave, roll and pitch of a ship in regular waves

import numpy as np
import matplotlib.pyplot as plt
import seakeeping

a    = 2               # wave amplitude (m)
beta = 45*np.pi/180    # wave direction (rad), pi is head seas
T_0  = 10              # wave period (s)
U    = 5               # ship speed (m/s)
L, B, T = 82.8, 19.2, 6

# default roll data [zeta4, T4, GM_T, Cb] = [0.2, 6, 1, 0.65]
t, z, phi, theta = seakeeping.waveResponse345(a, beta, T_0, U, L, B, T, display=1)
seakeeping.plotWaveResponse(t, z, phi, theta, a, beta)

# less roll damping and a longer roll period
ship = seakeeping.ShipData(zeta4=0.1, T4=10, GM_T=1.5, Cb=0.7)
t, z, phi, theta = seakeeping.waveResponse345(a, beta, T_0, U, L, B, T, ship=ship, display=1)
seakeeping.plotWaveResponse(t, z, phi, theta, a, beta)

plt.show()
