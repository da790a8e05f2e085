# Amplitude (1/Z) curves of heave, roll and pitch treated as harmonic oscillators

import numpy as np
import matplotlib.pyplot as plt

from seakeeping.helpers import (TwoPi, InvalidParameterError, checkPositive,
                                checkNonNegative, oscillatorImpedance)


def impedanceCurves(wn, zeta, wr=None):
    '''
    Computes the change in amplitude 1/Zm with respect to the frequency ratio w/wn
    for heave, roll and pitch. Each mode is the closed-form steady-state solution of
    a linear mass-damper-spring system with sinusoidal forcing,

        m x'' + d x' + k x = F sin(w t),     wn = sqrt(k/m)

    Roll is evaluated twice, with the given damping and with twice that damping,
    to show how sensitive the resonance peak is to the roll damping estimate.

    Parameters
    ----------
    wn : list of 3 floats
        natural frequencies of heave, roll and pitch [rad/s]
    zeta : list of 3 floats
        relative damping ratios of heave, roll and pitch [-]
    wr : array, optional
        frequency ratios w/wn to evaluate. Defaults to 0 to 2.5 in steps of 0.01.

    Returns
    -------
    curves : dict
        arrays of 1/Zm over wr for 'heave', 'roll', 'roll_double' and 'pitch',
        plus the doubled roll damping ratio as 'zeta_roll_double'.
        Undamped resonance (Zm = 0) gives inf.
    '''

    if len(wn) != 3 or len(zeta) != 3:
        raise InvalidParameterError("wn and zeta must each have 3 entries (heave, roll, pitch).")

    w3, w4, w5 = [checkPositive(f"natural frequency {name}", w) for name, w in zip(['w3','w4','w5'], wn)]
    z3, z4, z5 = [checkNonNegative(f"damping ratio {name}", z) for name, z in zip(['z3','z4','z5'], zeta)]

    if wr is None:
        wr = np.arange(0, 2.5+0.005, 0.01)
    wr = np.array(wr, dtype=float)
    if np.any(wr < 0) or not np.all(np.isfinite(wr)):
        raise InvalidParameterError("Frequency ratios must be finite and non-negative.")

    z4_double = 2*z4

    with np.errstate(divide='ignore'):
        curves = {}
        curves['heave'      ] = 1/oscillatorImpedance(w3, z3,        w3*wr)
        curves['roll'       ] = 1/oscillatorImpedance(w4, z4,        w4*wr)
        curves['roll_double'] = 1/oscillatorImpedance(w4, z4_double, w4*wr)
        curves['pitch'      ] = 1/oscillatorImpedance(w5, z5,        w5*wr)

    curves['zeta_roll_double'] = z4_double

    return curves


def impedanceCurvesFromPeriods(T, zeta, wr=None):
    '''Same as impedanceCurves but takes the 6-DOF natural periods [s] and damping ratios
    from a vessel-parameter provider, using the heave, roll and pitch entries (indices 2, 3, 4).'''

    if len(T) < 5 or len(zeta) < 5:
        raise InvalidParameterError("Natural periods and damping ratios must cover at least surge to pitch.")

    wn = [TwoPi/checkPositive(f"natural period T[{i}]", T[i]) for i in (2, 3, 4)]

    return wn, impedanceCurves(wn, [zeta[2], zeta[3], zeta[4]], wr=wr)


def plotImpedanceCurves(wr, curves, wn, zeta, ax=None):
    '''Plots the four amplitude curves on one chart with a legend of the damping and natural frequency of each.'''

    if ax is None:
        fig, ax = plt.subplots(1, 1)
    else:
        fig = ax.get_figure()

    w3, w4, w5 = wn
    z3, z4, z5 = zeta

    ax.plot(wr, curves['heave'      ], '-.k', linewidth=2,
            label=f'Heave: damping z_3 = {z3:3.2f}, nat. frequency w_3 = {w3:3.2f}')
    ax.plot(wr, curves['roll'       ], '-k',  linewidth=2,
            label=f'Roll:  damping z_4 = {z4:3.2f}, nat. frequency w_4 = {w4:3.2f}')
    ax.plot(wr, curves['roll_double'], '-k',  linewidth=1,
            label=f"Roll:  damping z_4 = {curves['zeta_roll_double']:3.2f}, nat. frequency w_4 = {w4:3.2f}")
    ax.plot(wr, curves['pitch'      ], ':k',  linewidth=2,
            label=f'Pitch: damping z_5 = {z5:3.2f}, nat. frequency w_5 = {w5:3.2f}')

    ax.set_title('Amplitudes')
    ax.set_xlabel('w_e/w_n')
    ax.set_ylabel('1/Z_m')
    ax.grid(True)
    ax.legend()

    return fig, ax
