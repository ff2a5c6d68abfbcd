"""Wake-on-LAN route — POST /wakeup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from wol_service.schemas.wake import AttemptResult, WakeDetails, WakeRequest, WakeResponse
from wol_service.services import get_wake_service
from wol_service.services.wake_service import WakeService
from wol_service.utils.wol import InvalidAddressError, MissingAddressError

logger = logging.getLogger(__name__)
router = APIRouter()


def _reply(status_code: int, body: WakeResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.post("/wakeup", response_model=WakeResponse)
async def wakeup(payload: WakeRequest, service: WakeService = Depends(get_wake_service)):
    """Send a magic packet; 200 if any attempt succeeded, 500 if none did."""
    try:
        report = await service.wake(
            mac=payload.mac_address,
            port=payload.port,
            interface=payload.interface,
            use_all_interfaces=payload.use_all_interfaces,
            broadcast=payload.broadcast_addr,
        )
    except MissingAddressError:
        return _reply(400, WakeResponse(success=False, message="MAC address not provided"))
    except InvalidAddressError as e:
        logger.info("Rejected wake request: %s", e)
        return _reply(400, WakeResponse(success=False, message=f"Invalid MAC address format: {e}"))

    sent = report.options
    details = WakeDetails(
        mac=report.mac or "",
        broadcast=sent.address,
        port=sent.port,
        interface=sent.interface,
        all_interfaces=report.all_interfaces,
        attempts=[
            AttemptResult(success=r.success, error=r.error, interface=r.interface, address=r.address)
            for r in report.results
        ],
    )

    if report.success:
        return WakeResponse(
            success=True,
            message="Wake-on-LAN packet sent successfully",
            details=details,
        )
    return _reply(500, WakeResponse(
        success=False,
        message="Failed to send Wake-on-LAN packet",
        details=details,
    ))
