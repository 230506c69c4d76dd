from __future__ import annotations

from uuid import UUID


class ProtocolDefect(RuntimeError):
    """A message reached code that cannot handle it.

    Raised when an envelope and its payload disagree. This is a routing bug
    upstream, so callers surface it instead of retrying.
    """


class DataTypeMismatchError(ProtocolDefect):
    def __init__(self, *, actual: str, expected: str) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Unexpected data type '{actual}'. Expected: '{expected}'.")


class DataConsumedError(ProtocolDefect):
    def __init__(self, *, message_id: UUID, expected: str) -> None:
        self.message_id = message_id
        self.expected = expected
        super().__init__(f"Data already retrieved from message {message_id}. Expected: '{expected}'.")
