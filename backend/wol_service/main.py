"""WOL Service FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wol_service import __version__
from wol_service.config import settings
from wol_service.services import init_services, shutdown_services
from wol_service.utils.interfaces import list_interfaces
from wol_service.utils.wol import check_broadcast_socket

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    # === STARTUP ===
    _setup_logging()
    init_services()
    _log_startup()

    try:
        yield
    finally:
        # === SHUTDOWN ===
        shutdown_services()
        logger.info("WOL Service shutting down")


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _log_startup() -> None:
    base = f"http://localhost:{settings.wol_service_port}{settings.api_prefix}"
    logger.info("WOL Service v%s running on port %s", __version__, settings.wol_service_port)
    logger.info("Health check:     %s/health", base)
    logger.info("Wake-up endpoint: %s/wakeup (POST)", base)
    logger.info("Diagnostic:       %s/diagnostic (GET)", base)
    logger.info("Test UI:          %s/test (GET)", base)

    logger.info("Server MAC: %s", settings.server_mac or "Not set")
    logger.info("Broadcast address: %s:%d", settings.wol_broadcast_addr, settings.wol_port)
    logger.info("Running in Docker: %s", "Yes" if settings.in_docker else "No")

    for iface in list_interfaces():
        if iface.family == "IPv4":
            logger.info("Interface %s: %s (internal: %s)", iface.name, iface.address, iface.internal)

    check_broadcast_socket()


def create_app() -> FastAPI:
    """Application factory."""
    from wol_service.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        description="Sends Wake-on-LAN magic packets on request",
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "wol_service.main:app",
        host=settings.wol_service_host,
        port=settings.wol_service_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
