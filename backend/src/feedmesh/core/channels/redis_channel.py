"""Redis pub/sub notification channel for multi-instance deployments."""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Dict, Optional

import redis.asyncio as redis

from ..exceptions import ChannelUnavailable
from .base import INotificationChannel

logger = logging.getLogger(__name__)


class RedisNotificationChannel(INotificationChannel):
    """Publishes events with PUBLISH; listeners use a dedicated PubSub connection."""

    def __init__(
        self,
        redis_url: str,
        publish_timeout: float = 1.0,
        client: Optional[redis.Redis] = None,
    ):
        self.redis_url = redis_url
        self.publish_timeout = publish_timeout
        self.redis: Optional[redis.Redis] = client

    def _client(self) -> redis.Redis:
        if self.redis is None:
            self.redis = redis.from_url(self.redis_url, decode_responses=True)
        return self.redis

    async def publish(self, topic: str, event: Dict[str, Any]) -> int:
        payload = json.dumps(event, default=str)
        try:
            return await asyncio.wait_for(
                self._client().publish(topic, payload), timeout=self.publish_timeout
            )
        except asyncio.TimeoutError:
            raise ChannelUnavailable(f"Publish to {topic} timed out") from None
        except redis.RedisError as e:
            raise ChannelUnavailable(f"Publish to {topic} failed: {e}") from e

    async def listen(self, topic: str) -> AsyncIterator[Dict[str, Any]]:
        pubsub = self._client().pubsub(ignore_subscribe_messages=True)
        await pubsub.subscribe(topic)
        try:
            async for message in pubsub.listen():
                if message.get("type") != "message":
                    continue
                try:
                    yield json.loads(message["data"])
                except (TypeError, ValueError):
                    logger.warning(f"Dropping malformed event on {topic}")
        finally:
            await pubsub.unsubscribe(topic)
            await pubsub.aclose()

    async def ping(self) -> bool:
        try:
            return bool(await self._client().ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")
