"""Wake-on-LAN (WOL) implementation — magic packet construction and delivery."""

from __future__ import annotations

import logging
import socket
import string
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_BROADCAST = "255.255.255.255"
DEFAULT_PORT = 9
DEFAULT_TIMEOUT = 0.5  # seconds

MAC_LENGTH = 6
PACKET_LENGTH = 6 + 16 * MAC_LENGTH  # 102 bytes

_HEX_DIGITS = frozenset(string.hexdigits)

# bind/sendto also reject bad arguments: NUL in a host name (TypeError),
# port out of range (OverflowError), malformed host (ValueError)
_SOCKET_ERRORS = (OSError, ValueError, TypeError, OverflowError)


class WolError(Exception):
    """Base class for Wake-on-LAN failures."""


class InvalidAddressError(WolError, ValueError):
    """Hardware address is not 12 hex digits after removing separators."""


class MissingAddressError(WolError):
    """No hardware address in the request and no configured default."""


class TransportError(WolError):
    """Bind or send failed for a single delivery attempt."""


@dataclass(frozen=True)
class WakeDefaults:
    """Process-wide wake settings, fixed at startup."""

    mac: str | None = None
    broadcast: str = DEFAULT_BROADCAST
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class SendOptions:
    address: str = DEFAULT_BROADCAST
    port: int = DEFAULT_PORT
    interface: str | None = None  # local address to bind, None = OS choice
    timeout: float | None = DEFAULT_TIMEOUT


@dataclass
class SendResult:
    success: bool
    error: str | None = None
    interface: str | None = None
    address: str | None = None


@dataclass
class SendReport:
    """Outcome of one wake request across one or more attempts."""

    results: list[SendResult] = field(default_factory=list)
    all_interfaces: bool = False
    mac: str | None = None
    options: SendOptions | None = None  # effective destination, before per-interface binding

    @property
    def success(self) -> bool:
        return any(r.success for r in self.results)

    @property
    def failures(self) -> list[SendResult]:
        return [r for r in self.results if not r.success]


def parse_mac(mac_address: str) -> bytes:
    """
    Decode a MAC address into its 6 raw bytes.

    Accepts "AA:BB:CC:DD:EE:FF", "aa-bb-cc-dd-ee-ff" or "AABBCCDDEEFF".

    Raises:
        InvalidAddressError: If the input is not exactly 12 hex digits once
            ":" and "-" are removed
    """
    if not isinstance(mac_address, str):
        raise InvalidAddressError(f"Invalid MAC address: {mac_address!r}")
    mac = mac_address.replace(":", "").replace("-", "")
    if len(mac) != 2 * MAC_LENGTH or not _HEX_DIGITS.issuperset(mac):
        raise InvalidAddressError(f"Invalid MAC address: {mac_address}")
    return bytes.fromhex(mac)


def build_magic_packet(mac_address: str) -> bytes:
    """Magic packet: 6x 0xFF + 16x MAC address."""
    return b"\xff" * 6 + parse_mac(mac_address) * 16


def _transmit(packet: bytes, options: SendOptions) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        if options.interface:
            try:
                sock.bind((options.interface, 0))
            except _SOCKET_ERRORS as e:
                raise TransportError(f"bind to {options.interface} failed: {e}") from e

        target = f"{options.address}:{options.port}"
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.settimeout(options.timeout)
            sent = sock.sendto(packet, (options.address, options.port))
        except TimeoutError as e:
            raise TransportError(f"send to {target} timed out after {options.timeout}s") from e
        except _SOCKET_ERRORS as e:
            raise TransportError(f"send to {target} failed: {e}") from e

        if sent != len(packet):
            raise TransportError(f"short write to {target}: {sent} of {len(packet)} bytes")


def send_magic_packet(packet: bytes, options: SendOptions | None = None) -> SendResult:
    """
    Send a prepared magic packet as a single UDP broadcast datagram.

    Bind and send errors never escape; they come back as a failed SendResult.

    Args:
        packet: Output of build_magic_packet()
        options: Destination, port, optional local interface address, timeout

    Returns:
        SendResult for this attempt
    """
    options = options or SendOptions()
    via = options.interface or "default"
    try:
        _transmit(packet, options)
    except TransportError as e:
        logger.warning("Magic packet via %s failed: %s", via, e)
        return SendResult(success=False, error=str(e), address=options.interface)

    logger.info(
        "Magic packet sent to %s:%d via %s (%d bytes)",
        options.address, options.port, via, len(packet),
    )
    return SendResult(success=True, address=options.interface)


def check_broadcast_socket() -> bool:
    """Startup self-test: can this host open a broadcast-capable UDP socket?"""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.bind(("", 0))
            logger.info("UDP socket test: created and bound socket")
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            except OSError as e:
                logger.error("UDP socket test: failed to enable broadcasting — %s", e)
                return False
            logger.info("UDP socket test: broadcasting enabled")
    except OSError as e:
        logger.error("UDP socket test: failed to create socket — %s", e)
        return False
    return True
