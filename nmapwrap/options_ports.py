"""Options for port specification and scan order."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_ports(*ports: str) -> Option:
    """Scan the given ports; repeated use extends the existing ``-p`` list."""
    port_list = ",".join(ports)

    def apply(scanner: Scanner) -> None:
        args = scanner.args
        try:
            place = args.index("-p")
        except ValueError:
            args.extend(["-p", port_list])
            return
        if place == len(args) - 1:
            args.append(port_list)
        else:
            args[place + 1] = f"{args[place + 1]},{port_list}"

    return apply


def with_port_exclusions(*ports: str) -> Option:
    """Do not scan the given ports."""
    return _append("--exclude-ports", ",".join(ports))


def with_fast_mode() -> Option:
    """Scan fewer ports than the default scan."""
    return _append("-F")


def with_consecutive_port_scanning() -> Option:
    """Scan ports consecutively instead of in random order."""
    return _append("-r")


def with_most_common_ports(number: int) -> Option:
    """Scan the given number of most common ports."""
    return _append("--top-ports", str(number))


def with_port_ratio(ratio: float) -> Option:
    """Scan ports more common than the given ratio, between 0 and 1."""
    if not 0 <= ratio <= 1:
        raise ValueError("value given to with_port_ratio() should be between 0 and 1")
    return _append("--port-ratio", f"{ratio:.1f}")