"""Base notifier interface for downstream chat webhooks."""

from abc import ABC, abstractmethod


class BaseNotifier(ABC):
    """Abstract base class for downstream notification channels."""

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Return channel identifier."""
        pass

    @abstractmethod
    async def notify(self, text: str) -> None:
        """Deliver a plain-text message. Raises NotificationError on failure."""
        pass

    async def notify_error(self, code: str, message: str, details: str | None = None) -> None:
        """Mirror an error response to the channel."""
        await self.notify(f"Error code: {code}\nError message: {message}\nDetails: {details or 'none'}")
