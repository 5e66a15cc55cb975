"""Options for firewall and IDS evasion and for spoofing."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_fragment_packets() -> Option:
    """Split probes into tiny fragmented IP packets."""
    return _append("-f")


def with_mtu(offset: int) -> Option:
    """Use the given offset size when fragmenting IP packets."""
    return _append("--mtu", str(offset))


def with_decoys(*decoys: str) -> Option:
    """Perform a decoy scan; ``ME`` marks the position of the real address."""
    return _append("-D", ",".join(decoys))


def with_spoof_ip_address(ip: str) -> Option:
    """Spoof the source IP address of the scanning machine."""
    return _append("-S", ip)


def with_interface(iface: str) -> Option:
    """Scan through the given network interface."""
    return _append("-e", iface)


def with_source_port(port: int) -> Option:
    """Send probes from the given source port (0 to 65535)."""
    if not 0 <= port <= 65535:
        raise ValueError("value given to with_source_port() should be between 0 and 65535")
    return _append("--source-port", str(port))


def with_proxies(*proxies: str) -> Option:
    """Relay connections through HTTP/SOCKS4 proxies."""
    return _append("--proxies", ",".join(proxies))


def with_hex_data(data: str) -> Option:
    """Append a custom hex-encoded payload to sent packets."""
    return _append("--data", data)


def with_ascii_data(data: str) -> Option:
    """Append a custom ASCII payload to sent packets."""
    return _append("--data-string", data)


def with_data_length(length: int) -> Option:
    """Append a random payload of the given length to sent packets."""
    return _append("--data-length", str(length))


def with_ip_options(options: str) -> Option:
    """Send packets with the specified IP options."""
    return _append("--ip-options", options)


def with_ip_time_to_live(ttl: int) -> Option:
    """Set the IP time-to-live field; it must be between 0 and 255."""
    if not 0 <= ttl <= 255:
        raise ValueError("value given to nmap.WithIPTimeToLive() should be between 0 and 255")
    return _append("--ttl", str(ttl))


def with_spoof_mac(argument: str) -> Option:
    """Use the given MAC address, prefix or vendor name for raw ethernet frames."""
    return _append("--spoof-mac", argument)


def with_bad_sum() -> Option:
    """Send packets with an invalid TCP, UDP or SCTP checksum."""
    return _append("--badsum")