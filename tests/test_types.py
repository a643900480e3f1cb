"""Tests for core types."""

import pytest

from messenger import Attachment, Campaign, ContentType, Message, MissingAttributeError, Subscriber


class TestSubscriberAttribStr:
    def test_returns_string_attribute(self, subscriber: Subscriber):
        assert subscriber.attrib_str("phone") == "+15550001111"

    def test_missing_attribute(self, subscriber: Subscriber):
        with pytest.raises(MissingAttributeError) as exc_info:
            subscriber.attrib_str("zip")
        assert exc_info.value.attribute == "zip"
        assert "zip" in str(exc_info.value)

    @pytest.mark.parametrize("value", [15550001111, None, ["+1555"], {"number": "+1555"}])
    def test_wrong_type_is_missing(self, value):
        subscriber = Subscriber(email="a@b.com", attribs={"phone": value})
        with pytest.raises(MissingAttributeError):
            subscriber.attrib_str("phone")

    def test_no_attribs(self):
        with pytest.raises(MissingAttributeError):
            Subscriber(email="a@b.com").attrib_str("phone")


class TestMessage:
    def test_defaults(self, subscriber: Subscriber):
        msg = Message(subscriber=subscriber)
        assert msg.content_type == ContentType.HTML
        assert msg.body == b""
        assert msg.headers == []
        assert msg.attachments == []
        assert msg.campaign is None

    def test_resolved_from_without_campaign(self, subscriber: Subscriber):
        msg = Message(subscriber=subscriber, from_email="x@y.com")
        assert msg.resolved_from() == "x@y.com"

    def test_campaign_overrides_from(self, subscriber: Subscriber):
        msg = Message(
            subscriber=subscriber,
            from_email="x@y.com",
            campaign=Campaign(from_email="news@y.com", name="October"),
        )
        assert msg.resolved_from() == "news@y.com"


class TestContentType:
    def test_compares_with_plain_strings(self):
        assert ContentType.PLAIN == "plain"
        assert ContentType("html") is ContentType.HTML


class TestAttachmentCopy:
    def test_copy_does_not_alias_content(self):
        buf = bytearray(b"report")
        original = Attachment(name="r.txt", content=buf, header=[("X-Id", "1")])

        copied = original.copy()
        buf[:] = b"XXXXXX"

        assert copied.content == b"report"
        assert copied.name == "r.txt"
        assert copied.header == [("X-Id", "1")]
        assert copied.header is not original.header
