# Test the closed-form steady-state heave, roll and pitch responses in regular waves

import warnings
import pytest
import numpy as np
from numpy.testing import assert_allclose
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from seakeeping.helpers import InvalidParameterError, SingularConditionError, sinc
from seakeeping.wave_response import (ShipData, asShipData, waveParameters, heavePitchCoefficients,
                                      rollCoefficients, waveResponseAmplitudes, waveResponse345,
                                      plotWaveResponse)


'''
 Define cases for testing
'''
# documented example: a, beta, T_0, U, L, B, T
example = (2, 45*np.pi/180, 10, 5, 82.8, 19.2, 6)

# a range of sea states: a, beta, T_0, U
list_cases = [
    (2.0, np.pi/4,   10.0, 5.0),
    (1.0, np.pi,      8.0, 7.0),      # head seas
    (1.5, 3*np.pi/4, 12.0, 0.0),
    (0.5, np.pi/3,    6.0, 2.0),
    (2.0, np.pi/6,   10.0, 25.0),     # overtaken by the waves, w_e < 0
]


def closedForm(a, beta, T_0, U, L, B, T, zeta4=0.2, T4=6, GM_T=1, Cb=0.65):
    '''Responses at t = 0 evaluated directly from the closed-form expressions.'''
    g, rho = 9.81, 1025
    nabla = Cb*L*B*T
    w_0 = 2*np.pi/T_0
    k = w_0**2/g
    w_e = w_0 - k*U*np.cos(beta)
    k_e = abs(k*np.cos(beta))
    sigma = k_e*L/2
    kappa = np.exp(-k_e*T)

    alpha = w_e/w_0
    A = 2*np.sin(k*B*alpha**2/2)*np.exp(-k*T*alpha**2)
    f = np.sqrt( (1-k*T)**2 + (A**2/(k*B*alpha**3))**2 )
    F = kappa*f*np.sin(sigma)/sigma
    G = kappa*f*(6/L)*(1/sigma)*( np.sin(sigma)/sigma - np.cos(sigma) )
    wn = np.sqrt(g/(2*T))
    zeta = (A**2/(B*alpha**3))*np.sqrt(1/(8*k**3*T))

    w4 = 2*np.pi/T4
    C44 = rho*g*nabla*GM_T
    M44 = C44/w4**2
    B44 = 2*zeta4*w4*M44
    M = np.sin(beta)*np.sqrt( B44*rho*g**2/w_e )

    Z3 = np.sqrt( (2*wn*zeta)**2 + (1/w_e**2)*(wn**2-w_e**2)**2 )
    eps3 = np.arctan( 2*w_e*wn*zeta/(wn**2-w_e**2) )
    Z4 = np.sqrt( (2*w4*zeta4)**2 + (1/w_e**2)*(w4**2-w_e**2)**2 )
    eps4 = np.arctan( 2*w_e*w4*zeta4/(w4**2-w_e**2) )

    z0     = (a*F*wn**2/(Z3*w_e))*np.cos(eps3)
    phi0   = (180/np.pi)*((M/C44)*w4**2/(Z4*w_e))*np.cos(eps4)
    theta0 = (180/np.pi)*(a*G*wn**2/(Z3*w_e))*np.sin(eps3)

    return z0, phi0, theta0


@pytest.fixture(params=list_cases)
def case(request):
    return request.param


'''
 Test functions
'''
def test_shipDataDefaults():
    ship = ShipData()
    assert [ship.zeta4, ship.T4, ship.GM_T, ship.Cb] == [0.2, 6.0, 1.0, 0.65]

    assert asShipData(None) == ship
    assert asShipData([0.2, 6, 1, 0.65]) == ship
    assert asShipData({'T4': 8.0}) == ShipData(T4=8.0)
    assert asShipData(ship) is ship


def test_shipDataInvalid():
    for kwargs in [dict(Cb=1.2), dict(Cb=0.0), dict(T4=0.0), dict(GM_T=-1.0), dict(zeta4=-0.1)]:
        with pytest.raises(InvalidParameterError):
            ShipData(**kwargs)
    with pytest.raises(InvalidParameterError):
        asShipData([0.2, 6, 1])


def test_shipDataReadOnly():
    ship = ShipData(zeta4=0.1, T4=10, GM_T=2.0, Cb=0.7)

    with pytest.raises(AttributeError):
        ship.Cb = 5.0
    with pytest.raises(AttributeError):
        ship.zeta4 = -1.0
    with pytest.raises(AttributeError):
        del ship.T4
    with pytest.raises(AttributeError):
        ship.L = 82.8

    assert ship == ShipData(zeta4=0.1, T4=10, GM_T=2.0, Cb=0.7)
    assert hash(ship) == hash(ShipData(zeta4=0.1, T4=10, GM_T=2.0, Cb=0.7))
    assert asShipData(ship) is ship


def test_headSeasAtRest():
    wave = waveParameters(10, 0, np.pi, 82.8, 6)
    assert wave['w_e'] == 2*np.pi/10
    assert wave['w_e'] == wave['w_0']


def test_waveParametersRepeatable():
    wave1 = waveParameters(10, 5, np.pi/4, 82.8, 6)
    wave2 = waveParameters(10, 5, np.pi/4, 82.8, 6)
    for key in ['w_0', 'k', 'w_e', 'k_e', 'sigma', 'kappa']:
        assert wave1[key] == wave2[key]


def test_waveParametersValues():
    wave = waveParameters(10, 5, np.pi/4, 82.8, 6)
    w_0 = 2*np.pi/10
    k = w_0**2/9.81
    assert_allclose(wave['w_0'], w_0, rtol=1e-14)
    assert_allclose(wave['k'], k, rtol=1e-14)
    assert_allclose(wave['w_e'], w_0 - k*5*np.cos(np.pi/4), rtol=1e-14)
    assert_allclose(wave['sigma'], abs(k*np.cos(np.pi/4))*82.8/2, rtol=1e-14)
    assert_allclose(wave['kappa'], np.exp(-abs(k*np.cos(np.pi/4))*6), rtol=1e-14)


def test_smallSigmaLimit():
    L = 1e-5
    wave = waveParameters(10, 0, 0.0, L, 6)
    assert wave['sigma'] < 1e-6
    assert abs(sinc(wave['sigma']) - 1.0) < 1e-9

    coefs = heavePitchCoefficients(wave, L, 19.2, 6)
    assert np.isfinite(coefs['F'])
    assert np.isfinite(coefs['G'])
    assert_allclose(coefs['F'], wave['kappa']*coefs['f'], rtol=1e-9)


def test_beamSeas():
    t, z, phi, theta = waveResponse345(1, np.pi/2, 10, 5, 82.8, 19.2, 6)
    for x in [z, phi, theta]:
        assert np.all(np.isfinite(x))
    assert np.max(np.abs(theta)) < 1e-6      # no pitch excitation in beam seas
    assert np.max(np.abs(phi)) > 0


def test_documentedExample():
    t, z, phi, theta = waveResponse345(*example)

    assert len(t) == 201
    assert t[0] == 0
    assert_allclose(t[-1], 20.0, rtol=1e-12)
    for x in [z, phi, theta]:
        assert len(x) == 201
        assert np.all(np.isfinite(x))

    z0, phi0, theta0 = closedForm(*example)
    assert_allclose([z[0], phi[0], theta[0]], [z0, phi0, theta0], rtol=1e-9, atol=0)


def test_closedFormAtZero(case):
    a, beta, T_0, U = case
    t, z, phi, theta = waveResponse345(a, beta, T_0, U, 82.8, 19.2, 6)

    for x in [z, phi, theta]:
        assert np.all(np.isfinite(x))

    w_0 = 2*np.pi/T_0
    if w_0 - w_0**2/9.81*U*np.cos(beta) > 0:     # w_e > 0 so the unguarded expressions are real
        z0, phi0, theta0 = closedForm(a, beta, T_0, U, 82.8, 19.2, 6)
        assert_allclose([z[0], phi[0], theta[0]], [z0, phi0, theta0], rtol=1e-9, atol=1e-12)


def test_shipParameters():
    ship = [0.1, 8, 2, 0.7]
    t, z, phi, theta = waveResponse345(*example, ship=ship)
    z0, phi0, theta0 = closedForm(*example, *ship)
    assert_allclose([z[0], phi[0], theta[0]], [z0, phi0, theta0], rtol=1e-9)

    # same result when the ship data is given as a record or a dictionary
    t2, z2, phi2, theta2 = waveResponse345(*example, ship=ShipData(zeta4=0.1, T4=8, GM_T=2, Cb=0.7))
    t3, z3, phi3, theta3 = waveResponse345(*example, ship={'zeta4': 0.1, 'T4': 8, 'GM_T': 2, 'Cb': 0.7})
    assert_allclose(phi2, phi, rtol=1e-14)
    assert_allclose(phi3, phi, rtol=1e-14)


def test_timeStepAndHorizon():
    t, z, phi, theta = waveResponse345(*example, dt=0.5, tMax=10)
    assert len(t) == 21
    assert_allclose(t[1], 0.5)
    assert len(z) == len(phi) == len(theta) == 21

    with pytest.raises(InvalidParameterError):
        waveResponse345(*example, dt=0)
    with pytest.raises(InvalidParameterError):
        waveResponse345(*example, tMax=-1)


def test_amplitudes():
    resp = waveResponseAmplitudes(*example)
    t, z, phi, theta = waveResponse345(*example)

    assert_allclose(np.max(np.abs(z)), abs(resp['heave']['amplitude']), rtol=1e-2)
    assert resp['heave']['phase'] == resp['pitch']['phase']
    assert resp['heave']['Z'] == resp['pitch']['Z']
    assert resp['heave']['Z'] >= 0 and resp['roll']['Z'] >= 0


def test_overtakingWaves():
    resp = waveResponseAmplitudes(2.0, np.pi/6, 10.0, 25.0, 82.8, 19.2, 6)
    assert resp['w_e'] < 0

    # the roll moment takes its sign from w_e instead of becoming complex
    assert np.isreal(resp['roll_coefs']['M'])
    assert resp['roll_coefs']['M'] < 0
    for mode in ['heave', 'roll', 'pitch']:
        assert np.isfinite(resp[mode]['amplitude'])


def test_rollCoefficients():
    wave = waveParameters(10, 5, np.pi/4, 82.8, 6)
    ship = ShipData()
    roll = rollCoefficients(wave, np.pi/4, 82.8, 19.2, 6, ship)

    nabla = 0.65*82.8*19.2*6
    assert_allclose(roll['nabla'], nabla, rtol=1e-14)
    assert_allclose(roll['C44'], 1025*9.81*nabla*1.0, rtol=1e-14)
    assert_allclose(roll['B44'], 2*0.2*roll['w4']*roll['C44']/roll['w4']**2, rtol=1e-14)
    assert roll['M'] > 0


def test_zeroEncounterFrequency():
    T_0 = 10
    U = 9.81/(2*np.pi/T_0)          # wave phase speed, following seas

    with pytest.raises(SingularConditionError):
        waveResponse345(1, 0.0, T_0, U, 82.8, 19.2, 6)

    t, z, phi, theta = waveResponse345(1, 0.0, T_0, U, 82.8, 19.2, 6, singular='nan')
    assert len(t) == 201
    for x in [z, phi, theta]:
        assert np.all(np.isnan(x))

    # only the wave quantities and the NaN mode entries are returned
    resp = waveResponseAmplitudes(1, 0.0, T_0, U, 82.8, 19.2, 6, singular='nan')
    assert 'heave_pitch' not in resp
    assert 'roll_coefs' not in resp
    assert 'wave' in resp and np.isnan(resp['roll']['amplitude'])

    with pytest.raises(InvalidParameterError):
        waveResponse345(1, 0.0, T_0, U, 82.8, 19.2, 6, singular='ignore')


def test_rollResonance():
    # beam-quartering seas at rest with the roll period equal to the wave period: w_e = w4
    a, beta, T_0, U, L, B, T = 1, 3*np.pi/4, 10, 0, 82.8, 19.2, 6
    ship = [0.2, 10, 1, 0.65]

    resp = waveResponseAmplitudes(a, beta, T_0, U, L, B, T, ship=ship)
    w4 = resp['roll_coefs']['w4']
    assert resp['w_e'] == w4

    # only the damping term remains in the impedance and the phase is pi/2
    assert_allclose(resp['roll']['Z'], 2*w4*0.2, rtol=1e-12)
    assert_allclose(resp['roll']['phase'], np.pi/2, rtol=1e-12)
    roll = resp['roll_coefs']
    assert_allclose(resp['roll']['amplitude'], 180/np.pi*roll['M']/roll['C44']*w4**2/(2*w4*0.2*w4), rtol=1e-12)

    t, z, phi, theta = waveResponse345(a, beta, T_0, U, L, B, T, ship=ship)
    for x in [z, phi, theta]:
        assert np.all(np.isfinite(x))
    assert np.max(np.abs(phi)) > 0
    assert abs(phi[0]) < 1e-10*np.max(np.abs(phi))     # cos(w_e t + pi/2) starts at zero


def test_undampedRollResonance():
    # head seas at rest with no roll damping and the roll period equal to the wave period
    args = (1, np.pi, 10, 0, 82.8, 19.2, 6)
    ship = [0.0, 10, 1, 0.65]

    with pytest.raises(SingularConditionError):
        waveResponse345(*args, ship=ship)
    with pytest.raises(SingularConditionError):
        waveResponseAmplitudes(1, 3*np.pi/4, 10, 0, 82.8, 19.2, 6, ship=ship)

    # the roll response is NaN on request while heave and pitch stay defined, with no numpy warnings
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        t, z, phi, theta = waveResponse345(*args, ship=ship, singular='nan')
        resp = waveResponseAmplitudes(*args, ship=ship, singular='nan')

    assert np.all(np.isnan(phi))
    assert np.all(np.isfinite(z))
    assert np.all(np.isfinite(theta))
    assert resp['roll']['Z'] == 0
    assert np.isnan(resp['roll']['amplitude'])
    assert np.isnan(resp['roll']['phase'])
    assert np.isfinite(resp['heave']['amplitude'])


def test_undampedResonanceDisplay(capsys):
    waveResponseAmplitudes(1, np.pi, 10, 0, 82.8, 19.2, 6, ship=[0.0, 10, 1, 0.65], singular='nan', display=1)
    assert 'WARNING - undamped resonance' in capsys.readouterr().out


def test_invalidParameters():
    a, beta, T_0, U, L, B, T = example
    with pytest.raises(InvalidParameterError):
        waveResponse345(-1, beta, T_0, U, L, B, T)
    with pytest.raises(InvalidParameterError):
        waveResponse345(a, beta, 0, U, L, B, T)
    with pytest.raises(InvalidParameterError):
        waveResponse345(a, beta, T_0, U, 0, B, T)
    with pytest.raises(InvalidParameterError):
        waveResponse345(a, beta, T_0, U, L, -19.2, T)
    with pytest.raises(InvalidParameterError):
        waveResponse345(a, beta, T_0, U, L, B, 0)
    with pytest.raises(InvalidParameterError):
        waveResponse345(a, beta, T_0, U, L, B, T, ship=[0.2, 6, 1, 1.5])
    with pytest.raises(InvalidParameterError):
        waveResponse345(a, beta, T_0, np.nan, L, B, T)

    # zero wave amplitude is accepted and gives no response
    t, z, phi, theta = waveResponse345(0, beta, T_0, U, L, B, T)
    assert np.all(z == 0) and np.all(theta == 0)


def test_display(capsys):
    waveResponse345(*example, display=2)
    out = capsys.readouterr().out
    assert 'frequency of encounter' in out
    assert 'heave amplitude' in out


def test_plotWaveResponse():
    t, z, phi, theta = waveResponse345(*example)
    fig, ax = plotWaveResponse(t, z, phi, theta, example[0], example[1])

    assert len(ax) == 3
    assert ax[0].get_title() == 'Steady-state heave response (m) for a = 2.0 m and beta 45.0 deg'
    assert ax[1].get_title().startswith('Steady-state roll response (deg)')
    assert ax[2].get_title().startswith('Steady-state pitch response (deg)')
    plt.close(fig)




'''
 To run as a script. Useful for debugging.
'''
if __name__ == "__main__":
    test_shipDataDefaults()
    test_shipDataInvalid()
    test_shipDataReadOnly()
    test_headSeasAtRest()
    test_waveParametersRepeatable()
    test_waveParametersValues()
    test_smallSigmaLimit()
    test_beamSeas()
    test_documentedExample()
    for c in list_cases:
        test_closedFormAtZero(c)
    test_shipParameters()
    test_timeStepAndHorizon()
    test_amplitudes()
    test_overtakingWaves()
    test_rollCoefficients()
    test_zeroEncounterFrequency()
    test_rollResonance()
    test_undampedRollResonance()
    test_invalidParameters()
    test_plotWaveResponse()
    print("Running as a script")
