"""Tests for the MockMessenger."""

import pytest

from messenger import Message, MockMessenger, Subscriber


def _message(body: bytes = b"hi") -> Message:
    return Message(subscriber=Subscriber(email="a@b.com"), body=body)


class TestMockMessenger:
    def test_records_pushed_messages(self, mock_messenger: MockMessenger):
        msg = _message()
        message_id = mock_messenger.push(msg)

        assert message_id.startswith("mock_")
        assert len(mock_messenger.sent) == 1
        assert mock_messenger.sent[0].message is msg
        assert mock_messenger.sent[0].message_id == message_id

    def test_fixed_message_id(self):
        messenger = MockMessenger(message_id="")
        assert messenger.push(_message()) == ""

    def test_configured_error(self):
        messenger = MockMessenger(error=RuntimeError("quota exceeded"))
        with pytest.raises(RuntimeError, match="quota exceeded"):
            messenger.push(_message())
        assert messenger.sent == []

    def test_lifecycle(self, mock_messenger: MockMessenger):
        assert mock_messenger.name == "mock"
        assert mock_messenger.flush() is None
        mock_messenger.close()
        assert mock_messenger.closed

    def test_reset_clears_sent(self, mock_messenger: MockMessenger):
        mock_messenger.push(_message())
        mock_messenger.reset()
        assert len(mock_messenger.sent) == 0
