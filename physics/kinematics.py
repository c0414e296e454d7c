"""
Relativistic helpers for lepton kinematics.

Units: MeV (natural units c = 1). Lab velocities are expressed as beta = v/c.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class FourVector:
    E: float
    px: float
    py: float
    pz: float

    @property
    def momentum(self) -> float:
        return float(np.linalg.norm([self.px, self.py, self.pz]))

    @property
    def mass(self) -> float:
        m2 = self.E * self.E - self.momentum * self.momentum
        return math.sqrt(max(m2, 0.0))

    def __repr__(self) -> str:
        return f"FourVector(E={self.E:.6f}, px={self.px:.6f}, py={self.py:.6f}, pz={self.pz:.6f})"


def lorentz_factor(beta: float) -> float:
    """gamma = 1 / sqrt(1 - beta^2), defined only for |beta| < 1."""
    beta2 = beta * beta
    if beta2 >= 1.0:
        raise ValueError(f"beta^2 < 1 required (got beta = {beta:.3f}).")
    return 1.0 / math.sqrt(1.0 - beta2)


def lab_fourvector(rest_mass: float, beta: float) -> FourVector:
    """Four-momentum of a particle of ``rest_mass`` moving along +z at ``beta``."""
    gamma = lorentz_factor(beta)
    return FourVector(gamma * rest_mass, 0.0, 0.0, gamma * rest_mass * beta)


def kinetic_energy(rest_mass: float, beta: float) -> float:
    """(gamma - 1) m, in MeV."""
    return (lorentz_factor(beta) - 1.0) * rest_mass
