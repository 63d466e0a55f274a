"""In-process topic hub for a single API instance."""

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, Set

from .base import INotificationChannel

logger = logging.getLogger(__name__)


class ChannelHub(INotificationChannel):
    """Topic registry of per-connection queues.

    Publishing never blocks: each subscriber has a bounded queue and an
    event is dropped for a subscriber whose queue is full.
    """

    def __init__(self, queue_size: int = 100):
        self.queue_size = queue_size
        self._lock = asyncio.Lock()
        self._subscribers: Dict[str, Set[asyncio.Queue]] = {}

    async def subscribe(self, topic: str) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.queue_size)
        async with self._lock:
            self._subscribers.setdefault(topic, set()).add(queue)
        return queue

    async def unsubscribe(self, topic: str, queue: asyncio.Queue) -> None:
        async with self._lock:
            queues = self._subscribers.get(topic)
            if not queues:
                return
            queues.discard(queue)
            if not queues:
                self._subscribers.pop(topic, None)

    async def publish(self, topic: str, event: Dict[str, Any]) -> int:
        async with self._lock:
            queues = list(self._subscribers.get(topic, ()))

        delivered = 0
        for queue in queues:
            try:
                queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning(f"Subscriber queue full on {topic}, dropping event")
        return delivered

    async def listen(self, topic: str) -> AsyncIterator[Dict[str, Any]]:
        queue = await self.subscribe(topic)
        try:
            while True:
                yield await queue.get()
        finally:
            await self.unsubscribe(topic, queue)

    async def ping(self) -> bool:
        return True

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, ()))
