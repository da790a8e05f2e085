# Seakeeping helper functions: constants, error classes and the closed-form oscillator formulas

import numpy as np


# global constants
g = 9.81             # acceleration of gravity [m/s^2]
rho = 1025.0         # density of sea water [kg/m^3]
TwoPi = 2.0*np.pi
rad2deg = 180.0/np.pi
deg2rad = np.pi/180.0


class SeakeepingError(Exception):
    '''Base class for errors raised by the seakeeping package.'''


class InvalidParameterError(SeakeepingError, ValueError):
    '''An input parameter is outside its physical range.'''


class SingularConditionError(SeakeepingError, ArithmeticError):
    '''A condition with no defined mathematical limit, e.g. zero frequency of encounter.'''


def getFromDict(dict, key, shape=0, dtype=float, default=None):
    '''
    Function to streamline getting values from a vessel dictionary read from YAML, including error checking.

    Parameters
    ----------
    dict : dict
        the dictionary
    key : string
        the key in the dictionary
    shape : int or list, optional
        The desired shape of the output. If not provided, a scalar is expected. If -1, any input shape is used.
    dtype : type
        A python type that can serve as a function to format the input value to the right type.
    default : number or list, optional
        The value to use if the key isn't in the dictionary. If None, a missing key raises an error.
    '''
    if key in dict:
        val = dict[key]

        if shape == 0:
            if np.isscalar(val):
                return dtype(val)
            else:
                raise ValueError(f"Value for key '{key}' is expected to be a scalar but instead is: {val}")

        elif shape == -1:
            if np.isscalar(val):
                return dtype(val)
            else:
                return np.array(val, dtype=dtype)

        else:
            if np.isscalar(val):
                return np.tile(dtype(val), shape)

            vala = np.array(val, dtype=dtype)
            if list(vala.shape) == list(np.atleast_1d(shape)):
                return vala
            else:
                raise ValueError(f"Value for key '{key}' is not the expected shape of {shape} and is instead: {val}")

    else:
        if default is None:
            raise ValueError(f"Key '{key}' not found in input file...")
        if shape == 0 or shape == -1:
            return default
        return np.tile(default, shape)


def checkPositive(name, val):
    '''Raise an InvalidParameterError unless val is a finite number greater than zero.'''
    if not np.isfinite(val) or val <= 0:
        raise InvalidParameterError(f"{name} must be a positive number, but got {val}.")
    return float(val)


def checkNonNegative(name, val):
    '''Raise an InvalidParameterError unless val is a finite number of at least zero.'''
    if not np.isfinite(val) or val < 0:
        raise InvalidParameterError(f"{name} must be zero or positive, but got {val}.")
    return float(val)


def toMatrix6(M, name='matrix'):
    '''Returns a 6x6 array from either 6 diagonal entries or a full 6x6 nested list.'''

    Ma = np.array(M, dtype=float)

    if Ma.shape == (6,):
        return np.diag(Ma)
    elif Ma.shape == (6,6):
        return Ma
    else:
        raise InvalidParameterError(f"{name} must have 6 diagonal entries or be 6x6, but has shape {Ma.shape}.")


# deep-water wave number from the dispersion relation w^2 = g k
def waveNumberDeep(w):
    return w*w/g


def encounterFrequency(w_0, U, beta):
    '''Frequency of encounter [rad/s] for wave frequency w_0 [rad/s], ship speed U [m/s]
    and wave direction beta [rad] (beta = pi is head seas).'''
    return w_0 - waveNumberDeep(w_0)*U*np.cos(beta)


def sinc(x):
    '''sin(x)/x with the analytic limit of 1 at x = 0.'''
    return np.sinc(x/np.pi)


def sincBracket(x):
    '''(sin(x)/x - cos(x))/x with the analytic limit of 0 at x = 0.'''
    if abs(x) < 1e-3:
        return x/3 - x**3/30 + x**5/840     # series expansion for small x
    return (sinc(x) - np.cos(x))/x


def oscillatorImpedance(wn, zeta, w):
    '''
    Impedance magnitude of a mass-spring-damper with unit mass driven at frequency w.

    Parameters
    ----------
    wn : float
        natural frequency [rad/s]
    zeta : float
        relative damping ratio [-]
    w : float | array
        forcing frequency or frequencies [rad/s]

    Returns
    -------
    Zm : float | array
        sqrt( w^2 (2 zeta wn)^2 + (wn^2 - w^2)^2 )
    '''
    w = np.asarray(w, dtype=float)
    return np.sqrt( (w**2)*(2*zeta*wn)**2 + (wn**2 - w**2)**2 )


def encounterImpedance(wn, zeta, w_e):
    '''Impedance term of the steady-state solution at the frequency of encounter,
    sqrt( (2 wn zeta)^2 + (wn^2 - w_e^2)^2 / w_e^2 ).'''
    return np.sqrt( (2*wn*zeta)**2 + (1/w_e**2)*(wn**2 - w_e**2)**2 )


def phaseLag(wn, zeta, w_e):
    '''Phase of the steady-state solution, atan( 2 w_e wn zeta / (wn^2 - w_e^2) ).
    At resonance the division gives +/-inf and the arctangent returns +/-pi/2.'''
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.arctan( np.float64(2*w_e*wn*zeta)/np.float64(wn**2 - w_e**2) ))
