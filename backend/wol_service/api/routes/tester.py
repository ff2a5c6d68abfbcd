"""Browser test page for trying WOL settings — GET /test."""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from wol_service.services import get_wake_service
from wol_service.services.wake_service import WakeService

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent.parent / "templates")


@router.get("/test", response_class=HTMLResponse)
async def test_page(request: Request, service: WakeService = Depends(get_wake_service)):
    defaults = service.defaults
    interfaces = [i for i in service.describe_interfaces() if not i.internal]
    return templates.TemplateResponse(
        request,
        "tester.html",
        {
            "mac": defaults.mac or "",
            "broadcast": defaults.broadcast,
            "port": defaults.port,
            "interfaces": interfaces,
        },
    )
