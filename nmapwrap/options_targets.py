"""Options for target specification."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_targets(*targets: str) -> Option:
    """Add targets to scan."""
    return _append(*targets)


def with_target_exclusions(*targets: str) -> Option:
    """Exclude the given targets."""
    return _append("--exclude", ",".join(targets))


def with_target_input(input_file_name: str) -> Option:
    """Read targets from a file."""
    return _append("-iL", input_file_name)


def with_target_exclusion_input(input_file_name: str) -> Option:
    """Read target exclusions from a file."""
    return _append("--excludefile", input_file_name)


def with_random_targets(random_targets: int) -> Option:
    """Scan the given number of randomly chosen targets."""
    return _append("-iR", str(random_targets))


def with_unique() -> Option:
    """Scan each address only once."""
    return _append("--unique")