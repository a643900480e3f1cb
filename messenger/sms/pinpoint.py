"""AWS Pinpoint SMS messenger."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from messenger.aws import connect, new_session
from messenger.config import PinpointConfig, parse_config
from messenger.types import Message

PROVIDER_NAME = "pinpoint"
CHANNEL_TYPE = "SMS"


class PinpointMessenger:
    """Sends SMS messages via the Pinpoint SendMessages API.

    The recipient's number is read from the subscriber's ``phone`` attribute.
    """

    def __init__(self, config: PinpointConfig, *, logger: logging.Logger | None = None) -> None:
        self._config = config
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        session = new_session(config.access_key, config.secret_key, config.region)
        self._client = connect(session, "pinpoint")

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    def push(self, message: Message) -> str:
        """Send an SMS. Always returns an empty identifier on success."""
        phone = message.subscriber.attrib_str("phone")

        sms: dict[str, Any] = {"Body": message.body.decode("utf-8", errors="replace")}
        if self._config.message_type:
            sms["MessageType"] = self._config.message_type
        if self._config.sender_id:
            sms["SenderId"] = self._config.sender_id

        out = self._client.send_messages(
            ApplicationId=self._config.app_id,
            MessageRequest={
                "Addresses": {phone: {"ChannelType": CHANNEL_TYPE}},
                "MessageConfiguration": {"SMSMessage": sms},
            },
        )

        if self._config.log:
            results = out.get("MessageResponse", {}).get("Result", {})
            for address, result in results.items():
                self._logger.info("successfully sent sms to %s: %r", address, result)

        return ""

    async def push_async(self, message: Message) -> str:
        """Send an SMS asynchronously (runs sync push in a thread)."""
        return await asyncio.to_thread(self.push, message)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> PinpointMessenger:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def new_pinpoint(cfg: bytes | str, logger: logging.Logger | None = None) -> PinpointMessenger:
    """Create a Pinpoint messenger from a JSON configuration blob."""
    return PinpointMessenger(parse_config(cfg, PinpointConfig), logger=logger)
