"""Fake notification sink — records dispatched messages for testing."""

from boutique.notifications.channel.port import NotificationSink


class FakeNotificationSink(NotificationSink):
    """Sink that keeps messages in memory and can be told to fail."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.should_succeed = True
        self.raise_error: Exception | None = None

    def configure(self, should_succeed: bool = True, raise_error: Exception | None = None) -> None:
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.raise_error = raise_error

    def dispatch(self, message: str) -> bool:
        if self.raise_error is not None:
            raise self.raise_error
        if not self.should_succeed:
            return False

        self.messages.append(message)
        return True

    def reset(self) -> None:
        """Clear recorded messages (useful between tests)."""
        self.messages.clear()
        self.should_succeed = True
        self.raise_error = None
