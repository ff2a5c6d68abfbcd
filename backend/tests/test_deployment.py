"""Tests for the container deployment files."""

from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def test_dockerfile_runs_console_script():
    dockerfile = (ROOT / "Dockerfile").read_text(encoding="utf-8")
    pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")

    assert "pip install" in dockerfile
    assert 'CMD ["wol-service"]' in dockerfile
    assert "EXPOSE 9/udp" in dockerfile
    assert 'wol-service = "wol_service.main:run"' in pyproject


def test_compose_uses_host_network_and_env():
    compose = (ROOT / "docker-compose.yml").read_text(encoding="utf-8")

    assert "network_mode: host" in compose
    for name in ("WOL_SERVICE_PORT", "SERVER_MAC", "WOL_BROADCAST_ADDR", "DOCKER_IMAGE=true"):
        assert name in compose
    assert "8002" in compose
