"""Local network interface enumeration (psutil)."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass

import psutil


@dataclass(frozen=True)
class NetworkInterface:
    name: str
    address: str
    family: str  # "IPv4" | "IPv6" | "other"
    internal: bool


def _family_name(family: int) -> str:
    if family == socket.AF_INET:
        return "IPv4"
    if family == socket.AF_INET6:
        return "IPv6"
    return "other"


def _is_internal(name: str, address: str) -> bool:
    """Loopback addresses (127.0.0.0/8, ::1) and the loopback device."""
    try:
        if ipaddress.ip_address(address.split("%", 1)[0]).is_loopback:
            return True
    except ValueError:
        pass
    return name == "lo"


def list_interfaces() -> list[NetworkInterface]:
    """Every address of every local interface, as reported by the OS."""
    interfaces: list[NetworkInterface] = []
    for name, addrs in psutil.net_if_addrs().items():
        for addr in addrs:
            family = _family_name(addr.family)
            if family == "other":
                continue
            interfaces.append(
                NetworkInterface(
                    name=name,
                    address=addr.address,
                    family=family,
                    internal=_is_internal(name, addr.address),
                )
            )
    return interfaces


def broadcast_candidates(interfaces: list[NetworkInterface]) -> list[NetworkInterface]:
    """Interfaces a magic packet can leave through: IPv4, not loopback."""
    return [i for i in interfaces if i.family == "IPv4" and not i.internal]
