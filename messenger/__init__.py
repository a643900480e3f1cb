"""
aws-messenger — Pluggable SMS and email delivery over AWS.

One contract, ``Messenger``, for sending a message through whichever provider
is configured. Owns everything from "I have a message and a provider config"
to "here is the provider's message ID". The calling app keeps templating,
queueing, scheduling and any retry policy beyond the SDK's.

Quick start — SMS via Pinpoint::

    from messenger import Message, Subscriber, new_messenger

    sms = new_messenger("pinpoint", b'{"app_id": "A1", "region": "us-east-1"}')
    sms.push(Message(
        subscriber=Subscriber(email="user@example.com", attribs={"phone": "+15550001111"}),
        body=b"Your code is 123456",
    ))

Quick start — Email via SES::

    from messenger import ContentType, Message, Subscriber, new_messenger

    ses = new_messenger("ses", b'{"region": "us-east-1", "log": true}')
    message_id = ses.push(Message(
        subscriber=Subscriber(email="user@example.com"),
        subject="Welcome",
        from_email="noreply@example.com",
        body=b"<h1>Hello!</h1>",
        content_type=ContentType.HTML,
    ))

Construction validates the configuration and checks the AWS credentials
with one STS call, so a messenger is never handed back half-initialized.

For testing::

    from messenger import MockMessenger

    messenger = MockMessenger()
    messenger.push(message)
    assert len(messenger.sent) == 1

Module overview
---------------
- ``types``     — Message model: Message, Subscriber, Campaign, Attachment, ContentType
- ``config``    — PinpointConfig, SESConfig and JSON blob parsing
- ``errors``    — ConfigError, CredentialError, MissingAttributeError, SerializationError
- ``base``      — the Messenger protocol
- ``aws``       — boto3 session construction and the shared credential check
- ``sms/``      — PinpointMessenger
- ``email/``    — SESMessenger and the MIME Envelope
- ``registry``  — construct a messenger by provider name
- ``mock``      — MockMessenger
"""

from .base import Messenger
from .config import PinpointConfig, SESConfig, parse_config
from .email import Envelope, SESMessenger, new_ses
from .errors import (
    ConfigError,
    CredentialError,
    MessengerError,
    MissingAttributeError,
    SerializationError,
    TransportError,
)
from .mock import MockMessenger
from .registry import new_messenger, providers, register
from .sms import PinpointMessenger, new_pinpoint
from .types import Attachment, Campaign, ContentType, Message, Subscriber

__all__ = [
    # Contract
    "Messenger",
    "new_messenger",
    "providers",
    "register",
    # Providers
    "PinpointMessenger",
    "SESMessenger",
    "MockMessenger",
    "new_pinpoint",
    "new_ses",
    # Types
    "Attachment",
    "Campaign",
    "ContentType",
    "Envelope",
    "Message",
    "Subscriber",
    # Config
    "PinpointConfig",
    "SESConfig",
    "parse_config",
    # Errors
    "ConfigError",
    "CredentialError",
    "MessengerError",
    "MissingAttributeError",
    "SerializationError",
    "TransportError",
]
