"""Shared test fixtures for the messenger library."""

import pytest

from messenger import MockMessenger, PinpointConfig, SESConfig, Subscriber


@pytest.fixture
def pinpoint_config() -> PinpointConfig:
    return PinpointConfig(
        app_id="A1",
        region="us-east-1",
        message_type="TRANSACTIONAL",
        sender_id="S",
    )


@pytest.fixture
def ses_config() -> SESConfig:
    return SESConfig(region="us-east-1")


@pytest.fixture
def subscriber() -> Subscriber:
    return Subscriber(
        email="a@b.com",
        name="Ada",
        attribs={"phone": "+15550001111", "city": "Lisbon"},
    )


@pytest.fixture
def mock_messenger() -> MockMessenger:
    return MockMessenger()


@pytest.fixture
def no_aws_region(monkeypatch, tmp_path):
    """Environment where botocore cannot resolve a region."""
    for var in ("AWS_REGION", "AWS_DEFAULT_REGION", "AWS_PROFILE", "AWS_DEFAULT_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
