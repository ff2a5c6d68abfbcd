"""Test health, diagnostic and tester page endpoints."""

from unittest.mock import patch

import pytest
from httpx import AsyncClient

from wol_service import __version__
from wol_service.utils.interfaces import NetworkInterface
from wol_service.utils.wol import WakeDefaults


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "wol-service"
    assert data["version"] == __version__


@pytest.mark.asyncio
@pytest.mark.parametrize("defaults", [WakeDefaults(mac="10:7B:44:93:F0:CD", broadcast="192.168.8.255")])
async def test_diagnostic(client: AsyncClient):
    listed = [
        NetworkInterface("lo", "127.0.0.1", "IPv4", True),
        NetworkInterface("eth0", "192.168.8.20", "IPv4", False),
    ]
    with patch("wol_service.api.routes.diagnostic.list_interfaces", return_value=listed):
        resp = await client.get("/diagnostic")

    assert resp.status_code == 200
    data = resp.json()
    assert data["config"]["mac"] == "10:7B:44:93:F0:CD"
    assert data["config"]["broadcast_addr"] == "192.168.8.255"
    assert data["config"]["wol_port"] == 9
    assert "python_version" in data["environment"]
    assert data["network_interfaces"][1] == {
        "name": "eth0", "address": "192.168.8.20", "family": "IPv4", "internal": False,
    }
    assert data["package_versions"]["wol-service"] == __version__


@pytest.mark.asyncio
@pytest.mark.parametrize("defaults", [WakeDefaults(mac="10:7B:44:93:F0:CD")])
async def test_tester_page(client: AsyncClient):
    resp = await client.get("/test")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    assert 'value="10:7B:44:93:F0:CD"' in html
    assert 'value="255.255.255.255"' in html
    assert '<option value="192.168.1.10">eth0 (192.168.1.10)</option>' in html
    assert "127.0.0.1" not in html
    assert "fe80::1" not in html


@pytest.mark.asyncio
@pytest.mark.parametrize("defaults", [WakeDefaults(mac='"><script>x</script>')])
async def test_tester_page_escapes_values(client: AsyncClient):
    resp = await client.get("/test")
    assert "<script>x</script>" not in resp.text


@pytest.mark.asyncio
async def test_cors_headers(client: AsyncClient):
    resp = await client.options(
        "/wakeup",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] in ("*", "http://example.com")
