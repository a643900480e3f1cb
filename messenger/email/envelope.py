"""Provider-agnostic email envelope and its MIME serialization."""

from __future__ import annotations

import email.errors
import mimetypes
from dataclasses import dataclass, field
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

from messenger.errors import SerializationError
from messenger.types import Attachment, ContentType, Headers

DEFAULT_ATTACHMENT_TYPE = "application/octet-stream"

# Set by add_attachment from the part's content; not copied from caller headers.
_MANAGED_PART_HEADERS = {"content-type", "content-transfer-encoding"}


@dataclass(slots=True)
class Envelope:
    """An email before wire serialization.

    ``sender`` is the address responsible for transmission and is written as a
    ``Sender`` header only when it differs from ``from_email``. ``content_type``
    selects the body that is sent; when unset it is inferred from which of
    ``text`` and ``html`` is populated.
    """

    from_email: str
    to: list[str]
    subject: str = ""
    sender: str = ""
    headers: Headers = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)
    text: bytes = b""
    html: bytes = b""
    content_type: ContentType | None = None

    def to_bytes(self) -> bytes:
        """Serialize to a raw MIME message.

        Raises:
            SerializationError: A header is malformed, the body is not valid
                UTF-8, or an attachment declares an unusable content type.
        """
        try:
            return self._build().as_bytes()
        except (ValueError, TypeError, LookupError, email.errors.MessageError) as exc:
            raise SerializationError(f"could not build email: {exc}") from exc

    def _build(self) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.from_email
        msg["To"] = ", ".join(self.to)
        msg["Subject"] = self.subject
        msg["Date"] = formatdate(localtime=True)
        msg["Message-Id"] = make_msgid()
        if self.sender and self.sender != self.from_email:
            msg["Sender"] = self.sender
        for key, value in self.headers:
            msg[key] = value

        if self.html and self.text:
            msg.set_content(self.text.decode("utf-8"))
            msg.add_alternative(self.html.decode("utf-8"), subtype="html")
        elif self._body_type() == ContentType.HTML:
            msg.set_content(self.html.decode("utf-8"), subtype="html")
        else:
            msg.set_content(self.text.decode("utf-8"))

        for attachment in self.attachments:
            _attach(msg, attachment)
        return msg

    def _body_type(self) -> ContentType:
        if self.content_type is not None:
            return self.content_type
        return ContentType.PLAIN if self.text and not self.html else ContentType.HTML


def _attach(msg: EmailMessage, attachment: Attachment) -> None:
    content_type = _header_value(attachment.header, "content-type")
    if content_type is None:
        content_type = mimetypes.guess_type(attachment.name)[0] or DEFAULT_ATTACHMENT_TYPE
    maintype, subtype = content_type.split(";", 1)[0].strip().split("/")
    if not maintype or not subtype:
        raise ValueError(f"invalid attachment content type {content_type!r}")

    msg.add_attachment(attachment.content, maintype=maintype, subtype=subtype, filename=attachment.name)
    part = msg.get_payload()[-1]

    extra = [(k, v) for k, v in attachment.header if k.lower() not in _MANAGED_PART_HEADERS]
    for key in {k.lower() for k, _ in extra}:
        del part[key]
    for key, value in extra:
        part[key] = value


def _header_value(headers: Headers, name: str) -> str | None:
    for key, value in headers:
        if key.lower() == name:
            return value
    return None
