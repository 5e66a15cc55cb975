"""Options for service and version detection."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_service_info() -> Option:
    """Probe open ports to determine service and version information."""
    return _append("-sV")


def with_version_intensity(intensity: int) -> Option:
    """Set the version probe intensity, from 0 (light) to 9 (all probes)."""
    if not 0 <= intensity <= 9:
        raise ValueError("value given to with_version_intensity() should be between 0 and 9")
    return _append("--version-intensity", str(intensity))


def with_version_light() -> Option:
    """Use version probe intensity 2."""
    return _append("--version-light")


def with_version_all() -> Option:
    """Use version probe intensity 9."""
    return _append("--version-all")


def with_version_trace() -> Option:
    """Print extensive debugging information about version scanning."""
    return _append("--version-trace")