"""
Physical constants for the lepton detection run.

Units: velocities in m/s, masses in MeV/c^2.
"""
from typing import Final

# Speed of light in vacuum (exact, SI definition)
SPEED_OF_LIGHT: Final[float] = 2.99792458e8

# Reference rest masses (MeV/c^2), rounded as used by the detection run
ELECTRON_MASS: Final[float] = 0.511
MUON_MASS: Final[float] = 105.7
