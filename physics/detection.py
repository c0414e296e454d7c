from typing import Dict, List

from .particles import Lepton
from .detectors import Detector


def run_detection(leptons: List[Lepton], detectors: List[Detector]) -> Dict:
    """
    Feed every lepton, in list order, to every detector, in list order.

    Args:
        leptons: Leptons to classify
        detectors: Detectors to feed; each keeps its own running count

    Returns:
        Dict with keys: counts (list of (detector type name, count) in
        detector order), detected, total
    """
    detected = 0
    for lepton in leptons:
        for detector in detectors:
            if detector.detect(lepton):
                detected += 1

    return {
        "counts": [(str(d.detector_type), d.count) for d in detectors],
        "detected": detected,
        "total": len(leptons),
    }
