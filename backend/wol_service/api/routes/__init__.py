"""API route registration."""

from fastapi import APIRouter

from wol_service.api.routes import diagnostic, health, tester, wakeup

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(wakeup.router, tags=["wol"])
api_router.include_router(diagnostic.router, tags=["diagnostic"])
api_router.include_router(tester.router, tags=["diagnostic"])
