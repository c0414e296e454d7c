# main.py
import logging
import sys

from physics.particles import Lepton, LeptonType
from physics.detectors import Detector, DetectorType
from physics.detection import run_detection
from physics.report import print_lepton_data


def build_reference_leptons():
    """Fixed lepton sample. The first electron is deliberately faster than light."""
    return [
        Lepton(LeptonType.ELECTRON, 0.511, -1, 1.2e9),
        Lepton(LeptonType.ELECTRON, 0.511, -1, 4.6e7),
        Lepton(LeptonType.MUON, 105.7, -1, 3.3e6),
        Lepton(LeptonType.MUON, 105.7, -1, 7.1e7),
        Lepton(LeptonType.MUON, 105.7, -1, 6.3e7),
        Lepton(LeptonType.MUON, 105.7, -1, 9.1e5),
        Lepton(LeptonType.ANTI_ELECTRON, 0.511, 1, 9.0e7),
        Lepton(LeptonType.ANTI_MUON, 105.7, 1, 7.0e7),
    ]


def build_detectors():
    return [
        Detector(DetectorType.TRACKER, is_on=False),
        Detector(DetectorType.CALORIMETER, is_on=False),
        Detector(DetectorType.MUON_CHAMBER, is_on=False),
    ]


def main():
    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(message)s")

    leptons = build_reference_leptons()
    detectors = build_detectors()

    for detector in detectors:
        detector.turn_on()

    run_detection(leptons, detectors)

    for detector in detectors:
        detector.print_summary()

    for lepton in leptons:
        print_lepton_data(lepton)

    for detector in detectors:
        detector.turn_off()


if __name__ == "__main__":
    main()
