"""Parsing of the interface and route tables printed by ``nmap --iflist``."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass, field
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PREFIX = re.compile(r"[0-9]+")
_MAC_FORMS = (
    re.compile(r"[0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2})+"),
    re.compile(r"[0-9A-Fa-f]{2}(?:-[0-9A-Fa-f]{2})+"),
    re.compile(r"[0-9A-Fa-f]{4}(?:\.[0-9A-Fa-f]{4})+"),
)
_MAC_LENGTHS = (6, 8, 20)


@dataclass
class Interface:
    """A network interface as reported by nmap."""

    device: str
    short: str
    type: str
    ip: IPAddress | None = None
    ip_mask: IPAddress | None = None
    up: bool = False
    mtu: int = 0
    mac: bytes | None = None


@dataclass
class Route:
    """A routing table entry as reported by nmap."""

    device: str
    destination_ip: IPAddress | None = None
    destination_ip_mask: IPAddress | None = None
    metric: int = 0
    gateway: IPAddress | None = None


@dataclass
class InterfaceList:
    """All interfaces and routes found in one ``--iflist`` output."""

    interfaces: list[Interface] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)


def _parse_int(text: str) -> int | None:
    return int(text) if _INTEGER.fullmatch(text) else None


def _parse_ip(text: str) -> IPAddress | None:
    if "%" in text:
        return None
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def _parse_cidr(text: str) -> tuple[IPAddress, IPAddress] | None:
    address, slash, prefix = text.rpartition("/")
    if not slash or "%" in address or not _PREFIX.fullmatch(prefix):
        return None
    try:
        network_interface = ipaddress.ip_interface(text)
    except ValueError:
        return None
    return network_interface.ip, network_interface.netmask


def _parse_mac(text: str) -> bytes | None:
    if not any(form.fullmatch(text) for form in _MAC_FORMS):
        return None
    raw = bytes.fromhex(re.sub(r"[:.\-]", "", text))
    return raw if len(raw) in _MAC_LENGTHS else None


def convert_interface(line: str) -> Interface | None:
    """Build an interface from one table line, or None if the line is too short."""
    fields = line.split()
    if len(fields) < 6:
        return None

    iface = Interface(device=fields[0], short=fields[1], type=fields[3])
    cidr = _parse_cidr(fields[2])
    if cidr is not None:
        iface.ip, iface.ip_mask = cidr
    iface.up = fields[4].lower() == "up"
    mtu = _parse_int(fields[5])
    if mtu is not None:
        iface.mtu = mtu
    if len(fields) > 6:
        iface.mac = _parse_mac(fields[6])
    return iface


def convert_route(line: str) -> Route | None:
    """Build a route from one table line, or None if the line is too short."""
    fields = line.split()
    if len(fields) < 3:
        return None

    route = Route(device=fields[1])
    cidr = _parse_cidr(fields[0])
    if cidr is not None:
        route.destination_ip, route.destination_ip_mask = cidr
    metric = _parse_int(fields[2])
    if metric is not None:
        route.metric = metric
    if len(fields) > 3:
        route.gateway = _parse_ip(fields[3])
    return route


def parse_interfaces(content: bytes | str) -> InterfaceList:
    """Parse the whole output of ``nmap --iflist``."""
    if isinstance(content, (bytes, bytearray)):
        content = content.decode("utf-8", errors="replace")
    lines = content.split("\n")

    result = InterfaceList()
    for index, line in enumerate(lines):
        following = lines[index + 2:]
        if "*INTERFACES*" in line:
            result.interfaces.extend(
                iface for iface in map(convert_interface, following) if iface is not None
            )
        if "*ROUTES*" in line:
            result.routes.extend(
                route for route in map(convert_route, following) if route is not None
            )
    return result