"""WOL Service configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from wol_service.utils.wol import DEFAULT_BROADCAST, DEFAULT_PORT, DEFAULT_TIMEOUT, WakeDefaults


class Settings(BaseSettings):
    """Service settings; field names match the WOL_* / SERVER_MAC environment variables."""

    app_name: str = "WOL Service"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP
    wol_service_host: str = "0.0.0.0"
    wol_service_port: int = 8002
    api_prefix: str = ""
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    # Wake-on-LAN defaults
    server_mac: str | None = None
    wol_broadcast_addr: str = DEFAULT_BROADCAST
    wol_port: int = DEFAULT_PORT
    wol_timeout: float = DEFAULT_TIMEOUT  # seconds per send attempt

    # Set by the container image
    docker_image: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def in_docker(self) -> bool:
        return bool(self.docker_image)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str) and value.startswith("["):
            return json.loads(value)
        if isinstance(value, str):
            return [o.strip() for o in value.split(",") if o.strip()]
        if isinstance(value, list):
            return value
        return ["*"]

    @field_validator("server_mac", mode="before")
    @classmethod
    def _blank_mac_is_unset(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("wol_port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("WOL_PORT must be between 1 and 65535")
        return value

    def wake_defaults(self) -> WakeDefaults:
        """Freeze the wake-related settings for the orchestrator."""
        return WakeDefaults(
            mac=self.server_mac,
            broadcast=self.wol_broadcast_addr,
            port=self.wol_port,
            timeout=self.wol_timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
