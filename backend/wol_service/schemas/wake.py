"""Wake-on-LAN request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WakeRequest(BaseModel):
    """POST /wakeup body — camelCase keys as sent by existing clients."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mac_address: str | None = Field(default=None, alias="macAddress")
    port: int | None = Field(default=None, ge=1, le=65535)
    interface: str | None = None
    use_all_interfaces: bool = Field(default=False, alias="useAllInterfaces")
    broadcast_addr: str | None = Field(default=None, alias="broadcastAddr")

    @field_validator("mac_address", mode="before")
    @classmethod
    def _mac_as_text(cls, value: Any) -> Any:
        # non-string MACs are rejected by the wake service (400), not by schema validation
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("port", mode="before")
    @classmethod
    def _zero_port_is_default(cls, value: Any) -> Any:
        if value == 0 and not isinstance(value, bool):
            return None
        return value


class AttemptResult(BaseModel):
    success: bool
    error: str | None = None
    interface: str | None = None
    address: str | None = None


class WakeDetails(BaseModel):
    mac: str
    broadcast: str
    port: int
    interface: str | None = None
    all_interfaces: bool = False
    attempts: list[AttemptResult] = []


class WakeResponse(BaseModel):
    success: bool
    message: str
    details: WakeDetails | None = None
