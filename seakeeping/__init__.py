# seakeeping: closed-form heave, roll and pitch responses of ships

from seakeeping.helpers import SeakeepingError, InvalidParameterError, SingularConditionError, getFromDict
from seakeeping.resonance import impedanceCurves, impedanceCurvesFromPeriods, plotImpedanceCurves
from seakeeping.wave_response import (ShipData, waveParameters, heavePitchCoefficients, rollCoefficients,
                                      waveResponseAmplitudes, waveResponse345, plotWaveResponse)
from seakeeping.vessel import Vessel, loadVessel
