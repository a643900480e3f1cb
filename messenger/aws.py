"""Shared AWS plumbing: session construction and credential validation."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .errors import ConfigError, CredentialError

logger = logging.getLogger(__name__)

MAX_RETRIES = 3

CLIENT_CONFIG = Config(retries={"max_attempts": MAX_RETRIES})


def new_session(access_key: str = "", secret_key: str = "", region: str = "") -> boto3.session.Session:
    """Build a session from static credentials, falling back to the ambient chain.

    Static credentials are used only when both keys are given. An empty
    region leaves resolution to the environment.
    """
    kwargs: dict[str, str] = {}
    if access_key and secret_key:
        kwargs["aws_access_key_id"] = access_key
        kwargs["aws_secret_access_key"] = secret_key
    if region:
        kwargs["region_name"] = region
    return boto3.session.Session(**kwargs)


def check_credentials(session: boto3.session.Session) -> None:
    """Verify the session's credentials with one STS GetCallerIdentity call."""
    try:
        sts = session.client("sts", config=CLIENT_CONFIG)
        sts.get_caller_identity()
    except (BotoCoreError, ClientError) as exc:
        logger.error("AWS credential check failed: %s", exc)
        raise CredentialError(f"could not verify AWS credentials: {exc}") from exc


def connect(session: boto3.session.Session, service: str) -> Any:
    """Validate ``session`` and return a client for ``service``.

    Raises:
        ConfigError: No region is configured or resolvable from the environment.
        CredentialError: The credential check failed or the client could not be built.
    """
    if not session.region_name:
        raise ConfigError("no AWS region configured; set region in the config or the environment")
    check_credentials(session)
    try:
        return session.client(service, config=CLIENT_CONFIG)
    except BotoCoreError as exc:
        logger.error("Could not create AWS %s client: %s", service, exc)
        raise CredentialError(f"could not create {service} client: {exc}") from exc
