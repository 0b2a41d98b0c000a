"""Notification sink port — where the formatted order summary is handed off."""

from abc import ABC, abstractmethod


class NotificationSink(ABC):
    """Abstract interface for order-summary dispatch adapters."""

    @abstractmethod
    def dispatch(self, message: str) -> bool:
        """Hand the message to the channel. Returns True if it was accepted."""
        ...
