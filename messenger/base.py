"""Base protocol for messengers."""

from __future__ import annotations

from typing import Protocol

from messenger.types import Message


class Messenger(Protocol):
    """Interface that all messengers must implement."""

    @property
    def name(self) -> str:
        """Stable lowercase identifier of the provider, e.g. ``"ses"``."""
        ...

    def push(self, message: Message) -> str:
        """Send one message and return the provider-assigned identifier.

        The identifier may be empty when the provider does not assign one.
        Raises on failure; the messenger stays usable for later sends.
        """
        ...

    def flush(self) -> None:
        """Drain any buffered messages."""
        ...

    def close(self) -> None:
        """Release resources held by the messenger."""
        ...
