"""
Lepton detectors.

Usage:
    from physics.detectors import Detector, DetectorType

    calorimeter = Detector(DetectorType.CALORIMETER, is_on=False)
    calorimeter.turn_on()
    matched = calorimeter.detect(lepton)
"""
from .base import Detector
from .registry import DetectorType, register, accepted_leptons, list_registered_detectors

__all__ = [
    "Detector",
    "DetectorType",
    "register",
    "accepted_leptons",
    "list_registered_detectors",
]
