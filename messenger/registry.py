"""Construct messengers by provider name.

Factories take the raw configuration blob and an optional logger, and return
a ready-to-use messenger or raise before one exists.
"""

from __future__ import annotations

import logging
from typing import Callable

from .base import Messenger
from .email.ses import PROVIDER_NAME as SES, new_ses
from .errors import ConfigError
from .sms.pinpoint import PROVIDER_NAME as PINPOINT, new_pinpoint

MessengerFactory = Callable[[bytes | str, logging.Logger | None], Messenger]

_FACTORIES: dict[str, MessengerFactory] = {
    PINPOINT: new_pinpoint,
    SES: new_ses,
}


def register(name: str, factory: MessengerFactory) -> None:
    """Register a factory under ``name``, replacing any existing one."""
    _FACTORIES[name] = factory


def providers() -> list[str]:
    """Names of all registered providers, sorted."""
    return sorted(_FACTORIES)


def new_messenger(name: str, cfg: bytes | str, logger: logging.Logger | None = None) -> Messenger:
    """Create the messenger registered under ``name``.

    Raises:
        ConfigError: No provider is registered under ``name`` or the
            configuration is invalid.
        CredentialError: The provider's credential check failed.
    """
    factory = _FACTORIES.get(name)
    if factory is None:
        raise ConfigError(f"unknown messenger provider {name!r}; expected one of {providers()}")
    return factory(cfg, logger)
