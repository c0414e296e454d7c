from ..particles import Lepton, LeptonType
from ..report import format_detector_summary
from .registry import DetectorType, accepted_leptons


class Detector:
    """
    Stationary lepton detector with an on/off switch and a hit counter.

    States are ON and OFF; turn_on/turn_off may be called from either. The
    counter only increases, only while ON, and only for lepton types the
    detector type accepts.
    """

    def __init__(self, detector_type, is_on: bool):
        self.detector_type = DetectorType(detector_type)
        self.is_on = is_on
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def turn_on(self) -> None:
        self.is_on = True
        print(f"The {self.detector_type} is on.\n")

    def turn_off(self) -> None:
        self.is_on = False
        print(f"\nThe {self.detector_type} is off.")

    def accepts(self, lepton_type) -> bool:
        """Whether this detector type responds to ``lepton_type`` (ignores power state)."""
        return LeptonType(lepton_type) in accepted_leptons(self.detector_type)

    def detect(self, lepton: Lepton) -> bool:
        """Count ``lepton`` if the detector is on and sees its type. Returns whether it matched."""
        if not self.is_on or not self.accepts(lepton.particle_type):
            return False

        self._count += 1
        print(f"The {self.detector_type} detected a {lepton.particle_type}")
        return True

    def print_summary(self) -> None:
        print("\n" + format_detector_summary(self))

    def __repr__(self):
        state = "on" if self.is_on else "off"
        return f"Detector(type={self.detector_type}, {state}, count={self.count})"
