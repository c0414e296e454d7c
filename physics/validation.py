"""
Advisory validation for lepton kinematics.

A failed check never stops the run. Each check returns a ValidationResult
holding the warning kind and the value that ended up stored, and the caller
decides whether the warning is fatal (``raise_for_warning``).
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .constants import SPEED_OF_LIGHT

ALLOWED_CHARGES = (1, -1)


class WarningKind(Enum):
    SUPERLUMINAL_VELOCITY = "superluminal_velocity"
    INVALID_CHARGE = "invalid_charge"


class PhysicsValidationError(ValueError):
    """Raised when a caller treats an advisory warning as fatal."""

    def __init__(self, result: "ValidationResult"):
        super().__init__(result.message)
        self.result = result


@dataclass(frozen=True)
class ValidationResult:
    value: Any
    kind: Optional[WarningKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is None

    def raise_for_warning(self) -> "ValidationResult":
        if not self.ok:
            raise PhysicsValidationError(self)
        return self


def check_velocity(velocity: float) -> ValidationResult:
    """Velocity must be strictly below c."""
    if velocity < SPEED_OF_LIGHT:
        return ValidationResult(velocity)
    return ValidationResult(
        velocity,
        WarningKind.SUPERLUMINAL_VELOCITY,
        f"velocity {velocity:.3e} m/s is not below c = {SPEED_OF_LIGHT:.8e} m/s",
    )


def check_charge(charge: int) -> ValidationResult:
    """Charge must be the integer +1 (antiparticles) or -1 (particles)."""
    if isinstance(charge, int) and not isinstance(charge, bool) and charge in ALLOWED_CHARGES:
        return ValidationResult(charge)
    return ValidationResult(
        charge,
        WarningKind.INVALID_CHARGE,
        f"charge {charge} is not +1 or -1",
    )
