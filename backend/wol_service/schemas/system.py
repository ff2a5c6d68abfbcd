"""Health and diagnostic schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str = "wol-service"
    version: str


class InterfaceInfo(BaseModel):
    name: str
    address: str
    family: str
    internal: bool


class ConfigInfo(BaseModel):
    mac: str | None = None
    broadcast_addr: str
    wol_port: int
    timeout_seconds: float
    port: int


class EnvironmentInfo(BaseModel):
    python_version: str
    platform: str
    arch: str
    in_docker: bool


class DiagnosticResponse(BaseModel):
    """Effective configuration and what the host network looks like."""
    config: ConfigInfo
    environment: EnvironmentInfo
    network_interfaces: list[InterfaceInfo]
    package_versions: dict[str, str]
