"""Error taxonomy for the messenger library."""

from __future__ import annotations

from botocore.exceptions import BotoCoreError, ClientError


class MessengerError(Exception):
    """Base class for errors raised by this library."""


class ConfigError(MessengerError, ValueError):
    """Raised when a provider configuration blob is malformed or incomplete."""


class CredentialError(MessengerError):
    """Raised when the construction-time identity check fails."""


class MissingAttributeError(MessengerError):
    """Raised when a required per-message attribute is absent or has the wrong type."""

    def __init__(self, attribute: str, message: str | None = None) -> None:
        super().__init__(message or f"could not find subscriber {attribute}")
        self.attribute = attribute


class SerializationError(MessengerError):
    """Raised when a message cannot be encoded to its wire format."""


# Transport failures are raised by botocore as-is.
TransportError = (BotoCoreError, ClientError)
