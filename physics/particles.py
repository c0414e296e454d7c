import logging
from dataclasses import replace
from enum import Enum

from .constants import SPEED_OF_LIGHT, ELECTRON_MASS, MUON_MASS
from .kinematics import FourVector, lorentz_factor, lab_fourvector, kinetic_energy
from .validation import ValidationResult, check_velocity, check_charge

logger = logging.getLogger(__name__)


class LeptonType(Enum):
    """Charged leptons the detectors know about."""

    ELECTRON = "electron"
    MUON = "muon"
    ANTI_ELECTRON = "anti-electron"
    ANTI_MUON = "anti-muon"

    @property
    def is_antiparticle(self) -> bool:
        return self.value.startswith("anti-")

    @property
    def flavour(self) -> str:
        return self.value.removeprefix("anti-")

    @property
    def expected_charge(self) -> int:
        return 1 if self.is_antiparticle else -1

    @property
    def rest_mass(self) -> float:
        return ELECTRON_MASS if self.flavour == "electron" else MUON_MASS

    def __str__(self) -> str:
        return self.value


class Lepton:
    """
    A single lepton with its rest mass, charge and velocity.

    Validation is advisory: a superluminal velocity at construction is logged
    and stored anyway (beta >= 1), while the setters log and reject bad input.
    Pass ``strict=True`` to turn a failed check into PhysicsValidationError.
    """

    def __init__(self, particle_type, rest_mass: float, charge: int, velocity: float, strict: bool = False):
        self._particle_type = LeptonType(particle_type)
        self._rest_mass = rest_mass
        self._charge = charge
        self._velocity = velocity
        self._beta = velocity / SPEED_OF_LIGHT

        self.construction_result = check_velocity(velocity)
        if not self.construction_result.ok:
            logger.warning(
                "\nOne or more of your beta values are incorrect, "
                "please ensure v < c for all particles."
            )
            if strict:
                self.construction_result.raise_for_warning()

    # -------------------- Mutators --------------------

    def set_particle_type(self, particle_type) -> None:
        self._particle_type = LeptonType(particle_type)

    def set_rest_mass(self, rest_mass: float) -> None:
        self._rest_mass = rest_mass

    def set_charge(self, charge: int, strict: bool = False) -> ValidationResult:
        result = check_charge(charge)
        if result.ok:
            self._charge = charge
            return result

        logger.warning("Invalid charge. Must be 1 (for particles) or -1 (for anti-particles)")
        result = replace(result, value=self._charge)
        if strict:
            result.raise_for_warning()
        return result

    def set_velocity(self, velocity: float, strict: bool = False) -> ValidationResult:
        result = check_velocity(velocity)
        if result.ok:
            self._velocity = velocity
            self._beta = velocity / SPEED_OF_LIGHT
            return result

        logger.warning("Invalid velocity. Please ensure v < c.")
        result = replace(result, value=self._velocity)
        if strict:
            result.raise_for_warning()
        return result

    # -------------------- Accessors --------------------

    @property
    def particle_type(self) -> LeptonType:
        return self._particle_type

    @property
    def rest_mass(self) -> float:
        return self._rest_mass

    @property
    def charge(self) -> int:
        return self._charge

    @property
    def velocity(self) -> float:
        return self._velocity

    @property
    def beta(self) -> float:
        return self._beta

    def get_particle_type(self) -> LeptonType:
        return self._particle_type

    def get_rest_mass(self) -> float:
        return self._rest_mass

    def get_charge(self) -> int:
        return self._charge

    def get_velocity(self) -> float:
        return self._velocity

    def get_beta(self) -> float:
        return self._beta

    # -------------------- Physics Methods --------------------

    @property
    def gamma(self) -> float:
        """Lorentz factor; undefined (ValueError) for beta >= 1."""
        return lorentz_factor(self._beta)

    def fourvector(self) -> FourVector:
        """Lab-frame four-momentum in MeV, moving along +z."""
        return lab_fourvector(self._rest_mass, self._beta)

    @property
    def kinetic_energy(self) -> float:
        return kinetic_energy(self._rest_mass, self._beta)

    # -------------------- Representation --------------------

    def __repr__(self):
        return (
            f"Lepton(type={self._particle_type}, mass={self._rest_mass:.3f} MeV/c², "
            f"charge={self._charge:+}e, v={self._velocity:.3e} m/s, beta={self._beta:.3f})"
        )
