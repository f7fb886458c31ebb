"""Key-value store backends for the repository."""

from __future__ import annotations

from typing import Protocol

import redis

from swot.config import settings


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class RedisStore:
    """String get/set over a Redis connection."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str | None = None) -> RedisStore:
        client = redis.Redis.from_url(
            url or settings.redis_url,
            decode_responses=True,
            max_connections=10,
            socket_timeout=settings.store_socket_timeout,
            socket_connect_timeout=settings.store_connect_timeout,
        )
        return cls(client)

    def get(self, key: str) -> str | None:
        return self._client.get(key)

    def set(self, key: str, value: str) -> None:
        self._client.set(key, value)

    def close(self) -> None:
        self._client.close()
