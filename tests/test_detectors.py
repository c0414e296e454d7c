"""
Detector state machine and acceptance table checks.

Tests:
    1. OFF detectors never count
    2. Acceptance table per detector type
    3. Reference sample counts per detector
    4. Messages printed on power changes and detections
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from main import build_reference_leptons
from physics.particles import Lepton, LeptonType
from physics.detectors import Detector, DetectorType, accepted_leptons, list_registered_detectors
from physics.detection import run_detection


def _lepton(lepton_type):
    return Lepton(lepton_type, lepton_type.rest_mass, lepton_type.expected_charge, 1.0e7)


@pytest.mark.parametrize("detector_type", list(DetectorType))
@pytest.mark.parametrize("lepton_type", list(LeptonType))
def test_off_detector_never_counts(detector_type, lepton_type):
    det = Detector(detector_type, is_on=False)
    assert det.detect(_lepton(lepton_type)) is False
    assert det.count == 0


@pytest.mark.parametrize(
    "lepton_type,expected",
    [
        (LeptonType.ELECTRON, True),
        (LeptonType.ANTI_ELECTRON, True),
        (LeptonType.MUON, False),
        (LeptonType.ANTI_MUON, False),
    ],
)
def test_calorimeter_sees_electrons_only(lepton_type, expected):
    det = Detector(DetectorType.CALORIMETER, is_on=True)
    assert det.detect(_lepton(lepton_type)) is expected
    assert det.count == int(expected)


def test_acceptance_table():
    assert accepted_leptons(DetectorType.TRACKER) == frozenset(LeptonType)
    assert accepted_leptons("muon chamber") == {LeptonType.MUON, LeptonType.ANTI_MUON}
    assert accepted_leptons(DetectorType.CALORIMETER) == {LeptonType.ELECTRON, LeptonType.ANTI_ELECTRON}
    models = list_registered_detectors()
    assert set(models) == {"tracker", "calorimeter", "muon chamber"}


def test_accepts_ignores_power_state():
    det = Detector("muon chamber", is_on=False)
    assert det.accepts("anti-muon")
    assert not det.accepts(LeptonType.ELECTRON)


def test_unknown_detector_type_raises():
    with pytest.raises(ValueError):
        Detector("calorimter", is_on=True)


def test_power_transitions_are_idempotent(capsys):
    det = Detector(DetectorType.TRACKER, is_on=False)
    det.turn_on()
    det.turn_on()
    assert det.is_on
    det.turn_off()
    det.turn_off()
    assert not det.is_on
    out = capsys.readouterr().out
    assert out.count("The tracker is on.") == 2
    assert out.count("The tracker is off.") == 2


def test_detection_message_and_summary(capsys):
    det = Detector(DetectorType.MUON_CHAMBER, is_on=True)
    det.detect(_lepton(LeptonType.ANTI_MUON))
    det.detect(_lepton(LeptonType.ELECTRON))
    det.print_summary()
    out = capsys.readouterr().out
    assert "The muon chamber detected a anti-muon" in out
    assert "electron" not in out
    assert "The muon chamber detected 1 particles" in out


def test_count_stops_after_turn_off():
    det = Detector(DetectorType.TRACKER, is_on=True)
    det.detect(_lepton(LeptonType.MUON))
    det.turn_off()
    det.detect(_lepton(LeptonType.MUON))
    assert det.count == 1


def test_reference_sample_counts():
    detectors = [Detector(t, is_on=True) for t in DetectorType]
    results = run_detection(build_reference_leptons(), detectors)
    assert results["counts"] == [("tracker", 8), ("calorimeter", 3), ("muon chamber", 5)]
    assert results["detected"] == 16
    assert results["total"] == 8


def test_run_detection_with_detectors_off():
    detectors = [Detector(t, is_on=False) for t in DetectorType]
    results = run_detection(build_reference_leptons(), detectors)
    assert results["detected"] == 0
    assert [count for _, count in results["counts"]] == [0, 0, 0]


def test_run_detection_keeps_detectors_of_same_type_apart():
    detectors = [
        Detector(DetectorType.TRACKER, is_on=True),
        Detector(DetectorType.TRACKER, is_on=False),
    ]
    results = run_detection(build_reference_leptons(), detectors)
    assert results["counts"] == [("tracker", 8), ("tracker", 0)]
    assert sum(count for _, count in results["counts"]) == results["detected"]
