"""Options controlling OS detection."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_os_detection() -> Option:
    """Enable OS detection."""
    return _append("-O")


def with_os_scan_limit() -> Option:
    """Skip OS detection on hosts without at least one open and one closed TCP port."""
    return _append("--osscan-limit")


def with_os_scan_guess() -> Option:
    """Guess the OS more aggressively."""
    return _append("--osscan-guess")