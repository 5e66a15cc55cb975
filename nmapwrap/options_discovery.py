"""Options controlling host discovery."""

from __future__ import annotations

from .scanner import Option, Scanner


def _append(*values: str) -> Option:
    def apply(scanner: Scanner) -> None:
        scanner.args.extend(values)

    return apply


def with_list_scan() -> Option:
    """Only list the targets, without scanning them."""
    return _append("-sL")


def with_ping_scan() -> Option:
    """Only ping the targets, without port scanning."""
    return _append("-sn")


def with_skip_host_discovery() -> Option:
    """Skip host discovery and treat every host as online."""
    return _append("-Pn")


def with_syn_discovery(*ports: str) -> Option:
    """Discover hosts with TCP SYN packets, on all ports if none are given."""
    return _append("-PS" + ",".join(ports))


def with_ack_discovery(*ports: str) -> Option:
    """Discover hosts with TCP ACK packets, on all ports if none are given."""
    return _append("-PA" + ",".join(ports))


def with_udp_discovery(*ports: str) -> Option:
    """Discover hosts with UDP packets, on all ports if none are given."""
    return _append("-PU" + ",".join(ports))


def with_sctp_discovery(*ports: str) -> Option:
    """Discover hosts with SCTP INIT packets, on all ports if none are given."""
    return _append("-PY" + ",".join(ports))


def with_icmp_echo_discovery() -> Option:
    """Discover hosts with ICMP echo requests."""
    return _append("-PE")


def with_icmp_timestamp_discovery() -> Option:
    """Discover hosts with ICMP timestamp requests."""
    return _append("-PP")


def with_icmp_netmask_discovery() -> Option:
    """Discover hosts with ICMP address mask requests."""
    return _append("-PM")


def with_ip_protocol_ping_discovery(*protocols: str) -> Option:
    """Discover hosts with an IP protocol ping on the given protocols."""
    return _append("-PO" + ",".join(protocols))


def with_disabled_dns_resolution() -> Option:
    """Never resolve names during discovery."""
    return _append("-n")


def with_forced_dns_resolution() -> Option:
    """Always resolve names during discovery."""
    return _append("-R")


def with_custom_dns_servers(*dns_servers: str) -> Option:
    """Use the given DNS servers."""
    return _append("--dns-servers", ",".join(dns_servers))


def with_system_dns() -> Option:
    """Use the operating system's DNS resolver."""
    return _append("--system-dns")


def with_trace_route() -> Option:
    """Trace the hop path to each host."""
    return _append("--traceroute")