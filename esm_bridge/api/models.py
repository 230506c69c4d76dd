from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from esm_bridge.message import MessageType


class HostValueResponse(BaseModel):
    type: str
    # Nested str/number/bool/list/map, as handed to the game server.
    host_value: Any
    sqf: str


class MessageHostValueResponse(HostValueResponse):
    message_id: UUID
    message_type: MessageType


class InfoResponse(BaseModel):
    name: str
    version: str
