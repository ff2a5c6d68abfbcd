"""Diagnostics — effective WOL configuration and host network view."""

import platform
from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, Depends

from wol_service import __version__
from wol_service.config import settings
from wol_service.schemas.system import ConfigInfo, DiagnosticResponse, EnvironmentInfo, InterfaceInfo
from wol_service.services import get_wake_service
from wol_service.services.wake_service import WakeService
from wol_service.utils.interfaces import list_interfaces

router = APIRouter()


def _package_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "unknown"


@router.get("/diagnostic", response_model=DiagnosticResponse)
async def diagnostic(service: WakeService = Depends(get_wake_service)):
    """Check what the service would use to send a magic packet."""
    defaults = service.defaults
    return DiagnosticResponse(
        config=ConfigInfo(
            mac=defaults.mac,
            broadcast_addr=defaults.broadcast,
            wol_port=defaults.port,
            timeout_seconds=defaults.timeout,
            port=settings.wol_service_port,
        ),
        environment=EnvironmentInfo(
            python_version=platform.python_version(),
            platform=platform.system().lower(),
            arch=platform.machine(),
            in_docker=settings.in_docker,
        ),
        network_interfaces=[
            InterfaceInfo(name=i.name, address=i.address, family=i.family, internal=i.internal)
            for i in list_interfaces()
        ],
        package_versions={
            "wol-service": __version__,
            "fastapi": _package_version("fastapi"),
            "psutil": _package_version("psutil"),
        },
    )
