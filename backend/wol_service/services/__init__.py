"""Business logic services — singleton registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wol_service.config import settings

if TYPE_CHECKING:
    from wol_service.services.wake_service import WakeService

logger = logging.getLogger(__name__)

_wake_service: WakeService | None = None


def init_services() -> None:
    """Create the service singletons from the loaded settings."""
    global _wake_service

    from wol_service.services.wake_service import WakeService

    _wake_service = WakeService(settings.wake_defaults())
    logger.info("Wake service initialized")


def shutdown_services() -> None:
    global _wake_service
    _wake_service = None


def get_wake_service() -> WakeService:
    if _wake_service is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _wake_service
