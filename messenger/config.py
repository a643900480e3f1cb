"""Provider configuration and parsing of configuration blobs.

Each provider is configured once, at construction time, from a JSON object.
Keys match field names case-insensitively. Unknown keys are ignored and
missing keys take their defaults, so a blob of ``{}`` is a valid SES
configuration.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

from .errors import ConfigError


@dataclass(frozen=True, slots=True)
class PinpointConfig:
    """Configuration for the Pinpoint SMS provider."""

    app_id: str = ""
    access_key: str = ""
    secret_key: str = ""
    region: str = ""
    message_type: str = ""
    sender_id: str = ""
    log: bool = False

    def __post_init__(self) -> None:
        if not self.app_id:
            raise ConfigError("invalid app_id")


@dataclass(frozen=True, slots=True)
class SESConfig:
    """Configuration for the SES email provider."""

    access_key: str = ""
    secret_key: str = ""
    region: str = ""
    log: bool = False


ConfigT = TypeVar("ConfigT", PinpointConfig, SESConfig)


def parse_config(blob: bytes | str, config_cls: type[ConfigT]) -> ConfigT:
    """Decode a JSON configuration blob into ``config_cls``.

    Raises:
        ConfigError: The blob is not a JSON object, a field has the wrong
            type, or the resulting config fails its own validation.
    """
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"could not parse {config_cls.__name__}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_cls.__name__} must be a JSON object, got {type(data).__name__}")

    # Keys match field names case-insensitively; an exact match wins.
    folded = {key.lower(): value for key, value in data.items()}
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(config_cls):
        value = data[f.name] if f.name in data else folded.get(f.name)
        if value is None:
            continue
        expected = bool if f.type in ("bool", bool) else str
        if not isinstance(value, expected):
            raise ConfigError(f"{f.name}: expected {expected.__name__}, got {type(value).__name__}")
        kwargs[f.name] = value

    return config_cls(**kwargs)
