from __future__ import annotations

import logging
from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from esm_bridge.data import R, Data, DataEmpty, default_data, tag_for, variant_for, variant_name
from esm_bridge.errors import DataConsumedError, DataTypeMismatchError

logger = logging.getLogger(__name__)


class MessageType(StrEnum):
    test = "test"
    init = "init"
    post_init = "post_init"
    query = "query"
    event = "event"


class Message(BaseModel):
    """Envelope exchanged with the host.

    `type` says what the message is for; `data` carries the payload. Routing
    happens on `type` before anything looks inside `data`.
    """

    model_config = ConfigDict(extra="forbid")

    id: UUID = Field(default_factory=uuid4)
    type: MessageType
    data: Data = Field(default_factory=default_data)

    _consumed: bool = PrivateAttr(default=False)

    @staticmethod
    def new(type: MessageType, data: Data | None = None) -> "Message":
        return Message(type=type, data=data if data is not None else default_data())

    @property
    def consumed(self) -> bool:
        return self._consumed


def retrieve_data(message: Message, record_type: type[R]) -> R:
    """Take the payload record out of `message`.

    The caller has already routed on `message.type` and knows which record to
    expect. Any disagreement with the payload is a defect: it raises
    `DataTypeMismatchError` and must not be recovered from. On success the
    message's payload is cleared and a second call raises `DataConsumedError`.

        init = retrieve_data(message, Init)
    """

    expected = tag_for(record_type)

    if message.consumed:
        logger.error("Data already retrieved from message %s (expected %r)", message.id, expected)
        raise DataConsumedError(message_id=message.id, expected=expected)

    data = message.data
    if not isinstance(data, variant_for(record_type)):
        actual = variant_name(data)
        logger.error(
            "Unexpected data type %r on %s message %s. Expected: %r.",
            actual,
            message.type.value,
            message.id,
            expected,
        )
        raise DataTypeMismatchError(actual=actual, expected=expected)

    message.data = DataEmpty()
    message._consumed = True
    logger.debug("Retrieved %s data from message %s", expected, message.id)
    return data.content  # type: ignore[return-value]
