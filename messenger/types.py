"""Core types for the messenger library."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import MissingAttributeError

Headers = list[tuple[str, str]]


class ContentType(str, Enum):
    """How a message body is interpreted."""

    PLAIN = "plain"
    HTML = "html"


@dataclass(frozen=True, slots=True)
class Attachment:
    """A file attached to an email."""

    name: str
    content: bytes
    header: Headers = field(default_factory=list)

    def copy(self) -> Attachment:
        """Return a copy that shares no buffers with this attachment."""
        return Attachment(name=self.name, content=bytes(self.content), header=list(self.header))


@dataclass(frozen=True, slots=True)
class Subscriber:
    """The recipient of a message."""

    email: str
    name: str = ""
    attribs: dict[str, Any] = field(default_factory=dict)

    def attrib_str(self, key: str) -> str:
        """Return a string attribute or raise MissingAttributeError.

        Absent keys and values that are not ``str`` are treated the same way.
        """
        value = self.attribs.get(key)
        if not isinstance(value, str):
            raise MissingAttributeError(key)
        return value


@dataclass(frozen=True, slots=True)
class Campaign:
    """The campaign a message belongs to."""

    from_email: str
    name: str = ""


@dataclass(frozen=True, slots=True)
class Message:
    """A single outbound message, independent of provider."""

    subscriber: Subscriber
    body: bytes = b""
    subject: str = ""
    from_email: str = ""
    headers: Headers = field(default_factory=list)
    content_type: ContentType = ContentType.HTML
    attachments: list[Attachment] = field(default_factory=list)
    campaign: Campaign | None = None

    def resolved_from(self) -> str:
        """The from address to send with. A campaign overrides the message's own."""
        if self.campaign is not None:
            return self.campaign.from_email
        return self.from_email
