from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from esm_bridge.api.deps import get_settings
from esm_bridge.api.models import HostValueResponse, InfoResponse, MessageHostValueResponse
from esm_bridge.config import BridgeSettings
from esm_bridge.data import decode_data, to_host_value, variant_name
from esm_bridge.host import render_sqf
from esm_bridge.message import Message

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/info", response_model=InfoResponse)
async def info(settings: BridgeSettings = Depends(get_settings)) -> InfoResponse:
    return InfoResponse(name="esm-bridge", version=settings.extension_version)


@router.post("/data/host_value", response_model=HostValueResponse)
async def data_host_value_route(request: Request) -> HostValueResponse:
    """Debug endpoint: decode a wire payload and show what the game server receives."""

    raw = await request.body()
    try:
        data = decode_data(raw)
        host_value = to_host_value(data)
        sqf = render_sqf(host_value)
    except (ValidationError, ValueError, TypeError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    logger.debug("Converted %s data", variant_name(data))
    return HostValueResponse(type=variant_name(data), host_value=host_value, sqf=sqf)


@router.post("/messages/host_value", response_model=MessageHostValueResponse)
async def message_host_value_route(request: Request) -> MessageHostValueResponse:
    raw = await request.body()
    try:
        message = Message.model_validate_json(raw)
        host_value = to_host_value(message.data)
        sqf = render_sqf(host_value)
    except (ValidationError, ValueError, TypeError) as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    logger.debug("Converted %s message %s", message.type.value, message.id)
    return MessageHostValueResponse(
        type=variant_name(message.data),
        host_value=host_value,
        sqf=sqf,
        message_id=message.id,
        message_type=message.type,
    )
