# Vessel class: provides natural periods and relative damping ratios from hydrodynamic data

import numpy as np
import yaml
from scipy.interpolate import interp1d

from seakeeping.helpers import (TwoPi, getFromDict, toMatrix6, checkPositive,
                                InvalidParameterError)
from seakeeping.wave_response import ShipData


DOFnames = ['surge', 'sway', 'heave', 'roll', 'pitch', 'yaw']


def loadVessel(fname):
    '''Reads a vessel description from a YAML file and returns a Vessel object.'''

    with open(fname) as file:
        design = yaml.load(file, Loader=yaml.FullLoader)

    return Vessel(design)


class Vessel:
    '''Hull data and 6-DOF rigid-body, added mass, damping and restoring matrices of a vessel.'''

    def __init__(self, design):
        '''
        Parameters
        ----------
        design : dict
            Dictionary of the vessel description with the sections 'main', 'mass',
            'restoring', 'hydro' and optionally 'viscous_damping'. Matrices can be
            given as 6 diagonal entries or as full 6x6 nested lists.
        '''

        self.name = design.get('name', 'unnamed vessel')

        main = design['main']
        self.L    = checkPositive('Lpp', getFromDict(main, 'Lpp'))
        self.B    = checkPositive('B'  , getFromDict(main, 'B'))
        self.T    = checkPositive('T'  , getFromDict(main, 'T'))
        self.Cb   = getFromDict(main, 'Cb'  , default=0.65)
        self.GM_T = getFromDict(main, 'GM_T', default=1.0)

        self.MRB = toMatrix6(design['mass']['MRB'], 'MRB')
        self.G   = toMatrix6(design['restoring']['G'], 'G')

        hydro = design['hydro']
        self.freqs = np.atleast_1d(getFromDict(hydro, 'freqs', shape=-1))    # frequencies of the hydrodynamic data [rad/s]
        self.nw = len(self.freqs)

        if self.nw < 1 or np.any(np.diff(self.freqs) <= 0) or np.any(self.freqs <= 0):
            raise InvalidParameterError("hydro freqs must be positive and strictly increasing.")

        # added mass and potential damping for each frequency, stored as [6, 6, nw]
        self.A = np.zeros([6, 6, self.nw])
        self.Bp = np.zeros([6, 6, self.nw])
        if len(hydro['A']) != self.nw or len(hydro['B']) != self.nw:
            raise InvalidParameterError(f"hydro A and B must have one entry for each of the {self.nw} frequencies.")
        for i in range(self.nw):
            self.A[:,:,i]  = toMatrix6(hydro['A'][i], f'A at frequency {i}')
            self.Bp[:,:,i] = toMatrix6(hydro['B'][i], f'B at frequency {i}')

        self.Bv = toMatrix6(getFromDict(design, 'viscous_damping', shape=6, default=0.0), 'viscous_damping')

        for i in range(6):
            if self.MRB[i,i] <= 0:
                raise InvalidParameterError(f"Diagonal entry {i} of MRB must be positive ({self.MRB[i,i]}).")
            if self.G[i,i] < 0:
                raise InvalidParameterError(f"Diagonal entry {i} of G must not be negative ({self.G[i,i]}).")


    def addedMass(self, w):
        '''Added mass matrix [6x6] at frequency w [rad/s], held constant outside the data range.'''
        return self._interp(self.A, w)

    def potentialDamping(self, w):
        '''Potential damping matrix [6x6] at frequency w [rad/s], held constant outside the data range.'''
        return self._interp(self.Bp, w)

    def _interp(self, data, w):
        if self.nw == 1:
            return data[:,:,0].copy()
        f = interp1d(self.freqs, data, axis=2, bounds_error=False,
                     fill_value=(data[:,:,0], data[:,:,-1]))
        return f(w)


    def naturalPeriods(self, tol=1e-5, nIter=100, display=0):
        '''
        Natural periods and relative damping ratios of the six DOFs. Each DOF with restoring
        is treated as uncoupled, and its natural frequency is found by iterating
        w = sqrt( G_ii / (MRB_ii + A_ii(w)) ) since the added mass depends on frequency.

        Returns
        -------
        T : array
            natural periods [s]; inf for DOFs with no restoring (surge, sway, yaw)
        zeta : array
            relative damping ratios [-], zeta_i = (Bp_ii(w) + Bv_ii) / (2 (MRB_ii + A_ii(w)) w)
        '''

        T = np.zeros(6) + np.inf
        zeta = np.zeros(6)

        for i in range(6):
            if self.G[i,i] <= 0:
                continue

            w = np.sqrt(self.G[i,i]/(self.MRB[i,i] + self.A[i,i,0]))   # start from the low-frequency added mass

            for iiter in range(nIter):
                M = self.MRB[i,i] + self.addedMass(w)[i,i]
                if M <= 0:
                    raise RuntimeError(f"Total mass of DOF {i+1} ({DOFnames[i]}) is not positive at w = {w:.4f} rad/s.")
                w_new = np.sqrt(self.G[i,i]/M)

                if abs(w_new - w) < tol*w:
                    w = w_new
                    if display > 1:
                        print(f" {DOFnames[i]}: converged after {iiter+1} iterations, w = {w:.5f} rad/s")
                    break
                w = w_new
            else:
                print(f"WARNING - natural frequency iteration for {DOFnames[i]} did not converge to the tolerance.")

            M = self.MRB[i,i] + self.addedMass(w)[i,i]
            T[i] = TwoPi/w
            zeta[i] = (self.potentialDamping(w)[i,i] + self.Bv[i,i])/(2*M*w)

        if display > 0:
            print("")
            print(f"--------- Natural periods of {self.name} ---------")
            print("DOF       "+"".join([f"{name:>10s}" for name in DOFnames]))
            print("T (s)     "+"".join([f"{Ti:10.3f}" for Ti in T]))
            print("zeta (-)  "+"".join([f"{zi:10.3f}" for zi in zeta]))
            print("--------------------------------------------------")

        return T, zeta


    def getShipData(self, tol=1e-5, nIter=100):
        '''ShipData for the closed-form wave response, using this vessel's roll period and damping.'''

        T, zeta = self.naturalPeriods(tol=tol, nIter=nIter)

        if not np.isfinite(T[3]):
            raise InvalidParameterError(f"{self.name} has no roll restoring, so its roll period is undefined.")

        return ShipData(zeta4=zeta[3], T4=T[3], GM_T=self.GM_T, Cb=self.Cb)
