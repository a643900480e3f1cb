"""SMS channel."""

from .pinpoint import PinpointMessenger, new_pinpoint

__all__ = ["PinpointMessenger", "new_pinpoint"]
