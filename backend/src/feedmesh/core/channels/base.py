"""Realtime publish contract used by the notification service."""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict


def user_topic(user_id: int) -> str:
    """Topic a user's live connections listen on."""
    return f"user:{user_id}"


class INotificationChannel(ABC):
    """Fire-and-forget pub/sub channel addressed by topic."""

    @abstractmethod
    async def publish(self, topic: str, event: Dict[str, Any]) -> int:
        """Publish an event; returns how many subscribers it reached (best effort).

        Must not wait for subscriber acknowledgment. Raises ChannelUnavailable
        when the channel cannot accept the event.
        """
        pass

    @abstractmethod
    def listen(self, topic: str) -> AsyncIterator[Dict[str, Any]]:
        """Yield events published to the topic until the consumer stops."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the channel can accept publishes."""
        pass

    async def close(self) -> None:
        """Release channel resources."""
        return None
