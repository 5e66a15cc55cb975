"""Miscellaneous scanner options."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_ipv6_scanning() -> Option:
    """Enable IPv6 scanning."""
    return _append("-6")


def with_aggressive_scan() -> Option:
    """Enable OS detection, version detection, default scripts and traceroute."""
    return _append("-A")


def with_data_dir(directory_path: str) -> Option:
    """Read nmap's data files from a custom directory."""
    return _append("--datadir", directory_path)


def with_send_ethernet() -> Option:
    """Send packets at the raw ethernet layer."""
    return _append("--send-eth")


def with_send_ip() -> Option:
    """Send packets through raw IP sockets."""
    return _append("--send-ip")


def with_privileged() -> Option:
    """Assume the user is fully privileged."""
    return _append("--privileged")


def with_unprivileged() -> Option:
    """Assume the user lacks raw socket privileges."""
    return _append("--unprivileged")


def with_nmap_output(output_file_name: str) -> Option:
    """Write nmap's normal output to the given file."""
    return _append("-oN", output_file_name)


def with_grep_output(output_file_name: str) -> Option:
    """Write nmap's greppable output to the given file."""
    return _append("-oG", output_file_name)