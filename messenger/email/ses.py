"""AWS SES email messenger."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from messenger.aws import connect, new_session
from messenger.config import SESConfig, parse_config
from messenger.types import ContentType, Message

from .envelope import Envelope

PROVIDER_NAME = "ses"


class SESMessenger:
    """Sends emails via the SES SendRawEmail API."""

    def __init__(self, config: SESConfig, *, logger: logging.Logger | None = None) -> None:
        self._config = config
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        session = new_session(config.access_key, config.secret_key, config.region)
        self._client = connect(session, "ses")

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    def push(self, message: Message) -> str:
        """Send an email and return the SES message ID."""
        envelope = build_envelope(message)
        raw = envelope.to_bytes()

        out = self._client.send_raw_email(
            Source=envelope.from_email,
            Destinations=[message.subscriber.email],
            RawMessage={"Data": raw},
        )

        if self._config.log:
            self._logger.info("successfully sent email to %s: %r", message.subscriber.email, out)

        return out["MessageId"]

    async def push_async(self, message: Message) -> str:
        """Send an email asynchronously (runs sync push in a thread)."""
        return await asyncio.to_thread(self.push, message)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> SESMessenger:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def build_envelope(message: Message) -> Envelope:
    """Translate a message into a single-recipient envelope.

    Attachments are copied so the caller's buffers are never aliased.
    """
    envelope = Envelope(
        from_email=message.resolved_from(),
        to=[message.subscriber.email],
        subject=message.subject,
        sender=message.from_email,
        headers=list(message.headers),
        attachments=[a.copy() for a in message.attachments],
    )
    if message.content_type == ContentType.PLAIN:
        envelope.content_type = ContentType.PLAIN
        envelope.text = bytes(message.body)
    else:
        envelope.content_type = ContentType.HTML
        envelope.html = bytes(message.body)
    return envelope


def new_ses(cfg: bytes | str, logger: logging.Logger | None = None) -> SESMessenger:
    """Create an SES messenger from a JSON configuration blob."""
    return SESMessenger(parse_config(cfg, SESConfig), logger=logger)
