"""
Lepton detection physics.

Usage:
    from physics.particles import Lepton, LeptonType
    from physics.detectors import Detector, DetectorType
    from physics.detection import run_detection
"""
