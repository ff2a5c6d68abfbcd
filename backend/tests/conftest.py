"""Test fixtures — fake UDP sockets, fake interfaces and FastAPI test client."""

import socket
from unittest.mock import MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wol_service.main import create_app
from wol_service.services import get_wake_service
from wol_service.services.wake_service import WakeService
from wol_service.utils.interfaces import NetworkInterface
from wol_service.utils.wol import WakeDefaults


class FakeUdp:
    """Stands in for socket.socket inside wol_service.utils.wol."""

    def __init__(self):
        self.sockets: list[MagicMock] = []
        self.datagrams: list[tuple[bytes, tuple[str, int]]] = []
        self.bind_errors: dict[str, Exception] = {}
        self.send_error: Exception | None = None
        self.short_write = False
        self.setsockopt_error: OSError | None = None

    def __call__(self, family, type_):
        sock = MagicMock()
        sock.__enter__.return_value = sock
        sock.__exit__.return_value = False
        sock.bind.side_effect = self._bind
        sock.sendto.side_effect = self._sendto
        if self.setsockopt_error is not None:
            sock.setsockopt.side_effect = self.setsockopt_error
        self.sockets.append(sock)
        return sock

    def _bind(self, addr):
        if addr[0] in self.bind_errors:
            raise self.bind_errors[addr[0]]

    def _sendto(self, data, addr):
        if self.send_error is not None:
            raise self.send_error
        self.datagrams.append((bytes(data), addr))
        return len(data) - 1 if self.short_write else len(data)


@pytest.fixture
def udp():
    """Patch the socket module used by the sender; yields the FakeUdp recorder."""
    fake = FakeUdp()
    with patch("wol_service.utils.wol.socket") as mock_socket:
        mock_socket.socket.side_effect = fake
        mock_socket.AF_INET = socket.AF_INET
        mock_socket.SOCK_DGRAM = socket.SOCK_DGRAM
        mock_socket.SOL_SOCKET = socket.SOL_SOCKET
        mock_socket.SO_BROADCAST = socket.SO_BROADCAST
        yield fake


@pytest.fixture
def interfaces():
    return [
        NetworkInterface(name="lo", address="127.0.0.1", family="IPv4", internal=True),
        NetworkInterface(name="eth0", address="192.168.1.10", family="IPv4", internal=False),
        NetworkInterface(name="eth0", address="fe80::1", family="IPv6", internal=False),
    ]


@pytest.fixture
def defaults():
    return WakeDefaults()


@pytest.fixture
def wake_service(defaults, interfaces):
    return WakeService(defaults, interface_provider=lambda: interfaces)


@pytest_asyncio.fixture
async def client(wake_service):
    """Async test client with the wake service dependency overridden."""
    app = create_app()
    app.dependency_overrides[get_wake_service] = lambda: wake_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
