"""Options controlling nmap's output."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_verbosity(level: int) -> Option:
    """Set the verbosity level, between 0 and 10."""
    if not 0 <= level <= 10:
        raise ValueError("value given to with_verbosity() should be between 0 and 10")
    return _append(f"-v{level}")


def with_debugging(level: int) -> Option:
    """Set the debugging level, between 0 and 10."""
    if not 0 <= level <= 10:
        raise ValueError("value given to with_debugging() should be between 0 and 10")
    return _append(f"-d{level}")


def with_reason() -> Option:
    """Show why each port is in its state."""
    return _append("--reason")


def with_open_only() -> Option:
    """Only show open ports."""
    return _append("--open")


def with_packet_trace() -> Option:
    """Show all packets sent and received."""
    return _append("--packet-trace")


def with_append_output() -> Option:
    """Append to output files instead of overwriting them."""
    return _append("--append-output")


def with_resume_previous_scan(file_path: str) -> Option:
    """Resume an aborted scan from its output file."""
    return _append("--resume", file_path)


def with_stylesheet(stylesheet_path: str) -> Option:
    """Apply an XSL stylesheet to the XML output."""
    return _append("--stylesheet", stylesheet_path)


def with_web_xml() -> Option:
    """Reference nmap's default online stylesheet in the XML output."""
    return _append("--webxml")


def with_no_stylesheet() -> Option:
    """Do not reference any XSL stylesheet in the XML output."""
    return _append("--no-stylesheet")


def with_non_interactive() -> Option:
    """Disable runtime keyboard interaction."""
    return _append("--noninteractive")