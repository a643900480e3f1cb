"""Mock messenger for testing.

Records all pushed messages and returns a configurable identifier or error.
Useful for unit testing code that depends on a messenger without hitting
real providers.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .types import Message


@dataclass
class PushedMessage:
    """Record of a message pushed through the MockMessenger."""

    message: Message
    message_id: str


class MockMessenger:
    """Test messenger that records messages.

    Usage::

        messenger = MockMessenger()
        message_id = messenger.push(Message(subscriber=Subscriber(email="a@b.com"), body=b"hi"))
        assert message_id.startswith("mock_")
        assert messenger.sent[0].message.body == b"hi"

    Configure a failure::

        messenger = MockMessenger(error=RuntimeError("quota exceeded"))
    """

    def __init__(
        self,
        *,
        message_id: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.message_id = message_id
        self.error = error
        self.sent: list[PushedMessage] = []
        self.closed = False

    @property
    def name(self) -> str:
        return "mock"

    def push(self, message: Message) -> str:
        if self.error is not None:
            raise self.error
        message_id = self.message_id if self.message_id is not None else f"mock_{uuid.uuid4().hex[:12]}"
        self.sent.append(PushedMessage(message=message, message_id=message_id))
        return message_id

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True

    def reset(self) -> None:
        """Clear all recorded messages."""
        self.sent.clear()
