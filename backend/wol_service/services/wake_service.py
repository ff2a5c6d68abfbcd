"""Wake orchestration — resolve MAC, build packet, dispatch to one or all interfaces."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Callable

from wol_service.utils.interfaces import NetworkInterface, broadcast_candidates, list_interfaces
from wol_service.utils.wol import (
    MissingAddressError,
    SendOptions,
    SendReport,
    SendResult,
    WakeDefaults,
    build_magic_packet,
    send_magic_packet,
)

logger = logging.getLogger(__name__)

InterfaceProvider = Callable[[], list[NetworkInterface]]


class WakeService:
    """Sends magic packets using a fixed set of defaults."""

    def __init__(
        self,
        defaults: WakeDefaults,
        interface_provider: InterfaceProvider | None = None,
    ):
        self._defaults = defaults
        self._list_interfaces = interface_provider or list_interfaces

    @property
    def defaults(self) -> WakeDefaults:
        return self._defaults

    def describe_interfaces(self) -> list[NetworkInterface]:
        """IPv4 interfaces, loopback included (diagnostics / tester page)."""
        return [i for i in self._list_interfaces() if i.family == "IPv4"]

    async def send_to_all_interfaces(
        self, packet: bytes, base_options: SendOptions
    ) -> SendReport:
        """One concurrent attempt per IPv4 non-loopback interface.

        Zero candidate interfaces yields an empty report.
        """
        candidates = broadcast_candidates(self._list_interfaces())
        if not candidates:
            logger.warning("No IPv4 non-internal interfaces available for broadcast")
            return SendReport(all_interfaces=True, options=base_options)

        async def _attempt(iface: NetworkInterface) -> SendResult:
            logger.debug("Trying interface %s (%s)", iface.name, iface.address)
            options = replace(base_options, interface=iface.address)
            result = await asyncio.to_thread(send_magic_packet, packet, options)
            result.interface = iface.name
            result.address = iface.address
            return result

        results = await asyncio.gather(*(_attempt(i) for i in candidates))
        return SendReport(results=list(results), all_interfaces=True, options=base_options)

    async def wake(
        self,
        mac: str | None = None,
        port: int | None = None,
        interface: str | None = None,
        use_all_interfaces: bool = False,
        broadcast: str | None = None,
    ) -> SendReport:
        """
        Send a Wake-on-LAN packet.

        Args:
            mac: Target MAC; falls back to the configured default
            port: UDP port override (9 by default, 7 on some NICs)
            interface: Local IPv4 address to send from
            use_all_interfaces: Send once through every non-loopback IPv4 interface
            broadcast: Broadcast address override

        Returns:
            SendReport; report.success is True if any attempt succeeded

        Raises:
            MissingAddressError: No MAC given and none configured
            InvalidAddressError: MAC is malformed (no packet is sent)
        """
        target = mac or self._defaults.mac
        if not target:
            raise MissingAddressError("MAC address not provided")

        packet = build_magic_packet(target)
        options = SendOptions(
            address=broadcast or self._defaults.broadcast,
            port=port or self._defaults.port,
            interface=interface or None,
            timeout=self._defaults.timeout,
        )
        logger.info(
            "Sending Wake-on-LAN packet to %s via %s:%d (interface: %s, all interfaces: %s)",
            target, options.address, options.port,
            options.interface or "default", use_all_interfaces,
        )

        if use_all_interfaces:
            report = await self.send_to_all_interfaces(packet, options)
        else:
            if logger.isEnabledFor(logging.DEBUG):
                for iface in self.describe_interfaces():
                    logger.debug("Interface %s: %s (internal: %s)", iface.name, iface.address, iface.internal)
            result = await asyncio.to_thread(send_magic_packet, packet, options)
            report = SendReport(results=[result])
        report.mac = target
        report.options = options

        if report.success:
            logger.info("Wake-on-LAN for %s: %d/%d attempts succeeded",
                        target, len(report.results) - len(report.failures), len(report.results))
        else:
            logger.error("Wake-on-LAN for %s failed on all %d attempts", target, len(report.results))
        return report
