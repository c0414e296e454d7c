"""Plain-text reports for leptons and detectors, built from public accessors only."""


def format_lepton(lepton) -> str:
    """Lepton details, floats fixed-point with 3 decimals."""
    return (
        f"Type of lepton: {lepton.particle_type}\n"
        f"Rest Mass (MeV): {lepton.rest_mass:.3f}\n"
        f"Charge: {lepton.charge}\n"
        f"Velocity (m/s): {lepton.velocity:.3f}\n"
        f"Beta Value: {lepton.beta:.3f}"
    )


def print_lepton_data(lepton) -> None:
    print("\n" + format_lepton(lepton) + "\n")


def format_detector_summary(detector) -> str:
    return f"The {detector.detector_type} detected {detector.count} particles"
