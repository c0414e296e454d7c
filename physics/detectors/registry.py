"""
Acceptance registry: maps detector types to the lepton types they see.

Key format: DetectorType member -> frozenset of LeptonType members.
Unregistered detector types accept nothing.
"""
from enum import Enum

from ..particles import LeptonType


class DetectorType(Enum):
    TRACKER = "tracker"
    CALORIMETER = "calorimeter"
    MUON_CHAMBER = "muon chamber"

    def __str__(self) -> str:
        return self.value


# Global registry: detector type -> accepted lepton types
_REGISTRY: dict = {}


def register(detector_type, lepton_types):
    """
    Register the lepton types a detector type responds to.

    Example:
        >>> register(DetectorType.CALORIMETER, (LeptonType.ELECTRON, LeptonType.ANTI_ELECTRON))
    """
    _REGISTRY[DetectorType(detector_type)] = frozenset(LeptonType(t) for t in lepton_types)


def accepted_leptons(detector_type) -> frozenset:
    """Lepton types seen by ``detector_type`` (empty if unregistered)."""
    return _REGISTRY.get(DetectorType(detector_type), frozenset())


def list_registered_detectors():
    """List every registered detector with the names of the leptons it accepts."""
    return {k.value: sorted(t.value for t in v) for k, v in _REGISTRY.items()}


# ========== AUTO-REGISTER DETECTOR ACCEPTANCE ==========
# Tracker: every charged lepton leaves a track
register(DetectorType.TRACKER, (
    LeptonType.ELECTRON, LeptonType.MUON,
    LeptonType.ANTI_ELECTRON, LeptonType.ANTI_MUON,
))

# Calorimeter: electromagnetic showers, e⁻ and e⁺ only
register(DetectorType.CALORIMETER, (LeptonType.ELECTRON, LeptonType.ANTI_ELECTRON))

# Muon chamber: μ⁻ and μ⁺ punch through to the outer layer
register(DetectorType.MUON_CHAMBER, (LeptonType.MUON, LeptonType.ANTI_MUON))
