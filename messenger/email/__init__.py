"""Email channel."""

from .envelope import Envelope
from .ses import SESMessenger, new_ses

__all__ = ["Envelope", "SESMessenger", "new_ses"]
