# Steady-state heave, roll and pitch of a ship in regular waves using closed-form expressions

import numpy as np
import matplotlib.pyplot as plt

from seakeeping.helpers import (g, rho, TwoPi, rad2deg, getFromDict, checkPositive, checkNonNegative,
                                InvalidParameterError, SingularConditionError, waveNumberDeep,
                                encounterFrequency, sinc, sincBracket, encounterImpedance, phaseLag)


class ShipData:
    '''Roll hydrodynamic data and block coefficient of a ship, with the default values
    zeta4 = 0.2, T4 = 6 s, GM_T = 1 m and Cb = 0.65. The values are validated once
    and are read-only afterwards.'''

    __slots__ = ('zeta4', 'T4', 'GM_T', 'Cb')

    def __init__(self, zeta4=0.2, T4=6.0, GM_T=1.0, Cb=0.65):
        '''
        Parameters
        ----------
        zeta4 : float
            relative damping factor in roll [-]
        T4 : float
            natural roll period [s]
        GM_T : float
            transverse metacentric height [m]
        Cb : float
            block coefficient, 0 < Cb <= 1 [-]
        '''
        Cb = checkPositive('Cb', Cb)
        if Cb > 1.0:
            raise InvalidParameterError(f"Cb must be in the range (0, 1], but got {Cb}.")

        object.__setattr__(self, 'zeta4', checkNonNegative('zeta4', zeta4))
        object.__setattr__(self, 'T4'   , checkPositive('T4', T4))
        object.__setattr__(self, 'GM_T' , checkPositive('GM_T', GM_T))
        object.__setattr__(self, 'Cb'   , Cb)

    def __setattr__(self, name, value):
        raise AttributeError(f"ShipData is read-only; create a new ShipData to change '{name}'.")

    def __delattr__(self, name):
        raise AttributeError(f"ShipData is read-only; '{name}' cannot be deleted.")

    @classmethod
    def fromDict(cls, d):
        '''Creates ShipData from a dictionary, using the defaults for any missing entries.'''
        return cls(zeta4 = getFromDict(d, 'zeta4', default=0.2),
                   T4    = getFromDict(d, 'T4'   , default=6.0),
                   GM_T  = getFromDict(d, 'GM_T' , default=1.0),
                   Cb    = getFromDict(d, 'Cb'   , default=0.65))

    def __repr__(self):
        return f"ShipData(zeta4={self.zeta4}, T4={self.T4}, GM_T={self.GM_T}, Cb={self.Cb})"

    def __eq__(self, other):
        if not isinstance(other, ShipData):
            return NotImplemented
        return [self.zeta4, self.T4, self.GM_T, self.Cb] == [other.zeta4, other.T4, other.GM_T, other.Cb]

    def __hash__(self):
        return hash((self.zeta4, self.T4, self.GM_T, self.Cb))


def asShipData(ship):
    '''Accepts None, a ShipData, a dict, or the 4-element list [zeta4, T4, GM_T, Cb].'''
    if ship is None:
        return ShipData()
    elif isinstance(ship, ShipData):
        return ship
    elif isinstance(ship, dict):
        return ShipData.fromDict(ship)
    elif len(ship) == 4:
        return ShipData(*ship)
    else:
        raise InvalidParameterError(f"ship must be ShipData, a dict, or [zeta4, T4, GM_T, Cb], but got {ship}.")


def waveParameters(T_0, U, beta, L, T):
    '''
    Derived wave quantities for a ship of length L and draft T advancing at speed U
    in regular deep-water waves of period T_0 and direction beta.

    Returns
    -------
    wave : dict
        w_0 wave frequency [rad/s], k wave number [1/m], w_e frequency of encounter [rad/s],
        k_e effective wave number [1/m], sigma = k_e L/2 [-], kappa = exp(-k_e T) [-]
    '''
    T_0 = checkPositive('T_0', T_0)
    L   = checkPositive('L', L)
    T   = checkPositive('T', T)
    if not np.isfinite(U) or not np.isfinite(beta):
        raise InvalidParameterError(f"U and beta must be finite, but got U = {U} and beta = {beta}.")

    wave = {}
    wave['w_0'  ] = TwoPi/T_0
    wave['k'    ] = waveNumberDeep(wave['w_0'])
    wave['w_e'  ] = encounterFrequency(wave['w_0'], U, beta)
    wave['k_e'  ] = abs(wave['k']*np.cos(beta))
    wave['sigma'] = wave['k_e']*L/2
    wave['kappa'] = np.exp(-wave['k_e']*T)

    return wave


def heavePitchCoefficients(wave, L, B, T):
    '''
    Heave and pitch excitation factors and the shared modal parameters of
    Jensen et al. (2004), Estimation of Ship Motions using Closed-form Expressions,
    Ocean Eng. 31, pp. 61-85.

    The natural frequency wn = sqrt(g/(2T)) and damping ratio are the closed-form
    approximations of that method (based on the Smith correction), not results of a
    hydrodynamic analysis. Heave and pitch use the same wn and zeta.
    '''
    k, w_0, w_e = wave['k'], wave['w_0'], wave['w_e']
    sigma, kappa = wave['sigma'], wave['kappa']

    alpha = w_e/w_0
    A = 2*np.sin(k*B*alpha**2/2)*np.exp(-k*T*alpha**2)
    f = np.sqrt( (1 - k*T)**2 + (A**2/(k*B*alpha**3))**2 )

    coefs = {}
    coefs['alpha'] = alpha
    coefs['A'    ] = A
    coefs['f'    ] = f
    coefs['F'    ] = kappa*f*sinc(sigma)
    coefs['G'    ] = kappa*f*(6/L)*sincBracket(sigma)
    coefs['wn'   ] = np.sqrt(g/(2*T))
    coefs['zeta' ] = (A**2/(B*alpha**3))*np.sqrt(1/(8*k**3*T))

    return coefs


def rollCoefficients(wave, beta, L, B, T, ship):
    '''
    Roll model (simplified version of Jensen et al., 2004). The roll moment amplitude
    needs sqrt(B44 rho g^2 / w_e), which has a negative radicand when the waves overtake
    the ship (w_e < 0); the magnitude is taken and the sign of w_e carried into M.
    '''
    w_e = wave['w_e']

    coefs = {}
    coefs['nabla'] = ship.Cb*L*B*T                              # volume displacement [m^3]
    coefs['w4'   ] = TwoPi/ship.T4                              # natural frequency [rad/s]
    coefs['C44'  ] = rho*g*coefs['nabla']*ship.GM_T             # spring coefficient
    coefs['M44'  ] = coefs['C44']/coefs['w4']**2                # moment of inertia including added mass
    coefs['B44'  ] = 2*ship.zeta4*coefs['w4']*coefs['M44']      # damping coefficient
    coefs['M'    ] = np.sign(w_e)*np.sin(beta)*np.sqrt( coefs['B44']*rho*g**2/abs(w_e) )  # roll moment amplitude

    return coefs


def _checkSingular(w_e, w_0, singular):
    if singular not in ('raise', 'nan'):
        raise InvalidParameterError(f"singular must be 'raise' or 'nan', but got '{singular}'.")

    if abs(w_e) <= 1e-12*w_0:
        if singular == 'raise':
            raise SingularConditionError(f"Frequency of encounter is zero (w_e = {w_e}): the wave crests are stationary relative to the ship and the steady-state response is undefined.")
        return True

    return False


def waveResponseAmplitudes(a, beta, T_0, U, L, B, T, ship=None, singular='raise', display=0):
    '''
    Amplitudes and phases of the steady-state heave, roll and pitch responses.

    Parameters
    ----------
    a : float
        wave amplitude [m]
    beta : float
        wave direction [rad], beta = pi is head seas and 0 is following seas
    T_0 : float
        wave period [s]
    U : float
        ship speed [m/s]
    L, B, T : float
        ship length, beam and draft [m]
    ship : ShipData | dict | list, optional
        roll data [zeta4, T4, GM_T, Cb]; defaults to [0.2, 6, 1, 0.65]
    singular : string
        'raise' raises SingularConditionError when the response is undefined: zero frequency
        of encounter, or undamped resonance (Z = 0) in a mode. 'nan' returns NaN amplitudes
        and phases for the undefined modes instead.
    display : int
        print level, 0 for silent

    Returns
    -------
    resp : dict
        'wave', 'heave_pitch' and 'roll_coefs' hold the intermediate quantities; 'heave', 'roll' and
        'pitch' each hold 'amplitude' ([m] for heave, [deg] for roll and pitch), 'phase' [rad]
        and 'Z'; 'w_e' is the frequency of encounter [rad/s]. With singular='nan' and zero
        frequency of encounter only 'wave', 'w_e' and the NaN mode entries are returned.
    '''
    a = checkNonNegative('a', a)
    B = checkPositive('B', B)
    ship = asShipData(ship)

    wave = waveParameters(T_0, U, beta, L, T)
    w_e = wave['w_e']

    resp = {'wave': wave, 'w_e': w_e}

    if _checkSingular(w_e, wave['w_0'], singular):
        if display > 0:
            print("WARNING - zero frequency of encounter; returning NaN responses.")
        for mode in ['heave', 'roll', 'pitch']:
            resp[mode] = dict(amplitude=np.nan, phase=np.nan, Z=np.nan)
        return resp

    hp = heavePitchCoefficients(wave, L, B, T)
    roll = rollCoefficients(wave, beta, L, B, T, ship)
    resp['heave_pitch'] = hp
    resp['roll_coefs'] = roll

    wn, zeta = hp['wn'], hp['zeta']
    w4 = roll['w4']

    # the steady-state solution is valid for all frequencies including resonance (w_e = wn)
    Z3   = encounterImpedance(wn, zeta, w_e)
    eps3 = phaseLag(wn, zeta, w_e)
    Z4   = encounterImpedance(w4, ship.zeta4, w_e)
    eps4 = phaseLag(w4, ship.zeta4, w_e)

    # undamped resonance: the impedance vanishes and the response has no finite limit
    undefined = [mode for mode, Z in [('heave', Z3), ('roll', Z4), ('pitch', Z3)] if Z == 0]
    if undefined:
        if singular == 'raise':
            raise SingularConditionError(f"Undamped resonance at w_e = {w_e:.5f} rad/s: the {' and '.join(undefined)} response is unbounded.")
        if display > 0:
            print(f"WARNING - undamped resonance; returning NaN {' and '.join(undefined)} responses.")

    for mode, gain, Z, eps in [('heave', a*hp['F']*wn**2,                         Z3, eps3),
                               ('pitch', rad2deg*a*hp['G']*wn**2,                 Z3, eps3),
                               ('roll' , rad2deg*(roll['M']/roll['C44'])*w4**2,   Z4, eps4)]:
        if Z > 0:
            resp[mode] = dict(amplitude=gain/(Z*w_e), phase=eps, Z=Z)
        else:
            resp[mode] = dict(amplitude=np.nan, phase=np.nan, Z=Z)

    if display > 0:
        print(f"Wave frequency w_0 = {wave['w_0']:.4f} rad/s, frequency of encounter w_e = {w_e:.4f} rad/s")
        if display > 1:
            print(f" k = {wave['k']:.5f}  k_e = {wave['k_e']:.5f}  sigma = {wave['sigma']:.4f}  kappa = {wave['kappa']:.4f}")
            print(f" F = {hp['F']:.4f}  G = {hp['G']:.6f}  wn = {wn:.4f}  zeta = {zeta:.4f}")
            print(f" C44 = {roll['C44']:.4e}  B44 = {roll['B44']:.4e}  M = {roll['M']:.4e}")
        print(f"heave amplitude {resp['heave']['amplitude']: .3f} m,  roll amplitude {resp['roll']['amplitude']: .3f} deg,  pitch amplitude {resp['pitch']['amplitude']: .3f} deg")

    return resp


def waveResponse345(a, beta, T_0, U, L, B, T, ship=None, dt=0.1, tMax=20.0, singular='raise', display=0):
    '''
    Computes the steady-state heave, roll and pitch responses for a ship in regular waves
    using the closed-form formulae of Jensen et al. (2004). Parameters are as for
    waveResponseAmplitudes, plus the time step dt [s] and duration tMax [s].

    Example: waveResponse345(2, 45*np.pi/180, 10, 5, 82.8, 19.2, 6)

    Returns
    -------
    t : array
        time [s], from 0 to tMax in steps of dt
    z : array
        heave [m]
    phi : array
        roll [deg]
    theta : array
        pitch [deg]
    '''
    dt   = checkPositive('dt', dt)
    tMax = checkPositive('tMax', tMax)

    resp = waveResponseAmplitudes(a, beta, T_0, U, L, B, T, ship=ship, singular=singular, display=display)

    t = np.arange(0, tMax + 0.5*dt, dt)
    w_e = resp['w_e']

    z     = resp['heave']['amplitude']*np.cos(w_e*t + resp['heave']['phase'])
    phi   = resp['roll' ]['amplitude']*np.cos(w_e*t + resp['roll' ]['phase'])
    theta = resp['pitch']['amplitude']*np.sin(w_e*t + resp['pitch']['phase'])

    return t, z, phi, theta


def plotWaveResponse(t, z, phi, theta, a, beta):
    '''Plots the steady-state heave, roll and pitch time series in three stacked subplots.'''

    fig, ax = plt.subplots(3, 1, sharex=True, figsize=(8,8))

    betaDeg = rad2deg*beta

    ax[0].plot(t, z,     '-k', linewidth=2)
    ax[0].set_title(f'Steady-state heave response (m) for a = {a:2.1f} m and beta {betaDeg:2.1f} deg')
    ax[1].plot(t, phi,   '-k', linewidth=2)
    ax[1].set_title(f'Steady-state roll response (deg) for a = {a:2.1f} m and beta {betaDeg:2.1f} deg')
    ax[2].plot(t, theta, '-k', linewidth=2)
    ax[2].set_title(f'Steady-state pitch response (deg) for a = {a:2.1f} m and beta {betaDeg:2.1f} deg')

    for axi in ax:
        axi.set_xlabel('time (s)')
        axi.grid(True)

    fig.tight_layout()

    return fig, ax
