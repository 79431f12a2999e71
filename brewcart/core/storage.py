"""Namespaced key-value storage shared by every storefront page.

Values are JSON strings kept in Redis. When Redis is not configured, or a
call to it fails, the storage switches to a per-process memory dict. Writes
made after the switch are visible to this process only and are not durable.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import redis

from brewcart.core.constants import DEFAULT_STORAGE_NAMESPACE, DEFAULT_STORAGE_VERSION

logger = logging.getLogger(__name__)

_REDIS_ERRORS = (redis.RedisError, OSError)


class KeyValueStorage:
    """String store keyed as ``<namespace>_<entry>[_<version>]``."""

    def __init__(
        self,
        redis_url: str | None = None,
        namespace: str = DEFAULT_STORAGE_NAMESPACE,
        version: str = DEFAULT_STORAGE_VERSION,
    ):
        self.namespace = namespace
        self.version = version
        self._redis_url = redis_url
        self._client = self._init_client()
        self._memory: dict[str, str] = {}

    def _init_client(self):
        if not self._redis_url:
            logger.warning("REDIS_URL is not set; storage uses in-memory fallback")
            return None

        try:
            client = redis.from_url(
                self._redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
            client.ping()
            logger.info("Redis storage enabled")
            return client
        except (*_REDIS_ERRORS, ValueError) as exc:
            logger.warning("Redis storage init failed, fallback to in-memory: %s", exc)
            return None

    def _switch_to_memory_fallback(self, reason: Exception | str) -> None:
        logger.warning("Redis storage fallback to memory mode: %s", reason)
        self._client = None

    @property
    def is_durable(self) -> bool:
        return self._client is not None

    def key(self, entry: str, versioned: bool = True) -> str:
        if versioned:
            return f"{self.namespace}_{entry}_{self.version}"
        return f"{self.namespace}_{entry}"

    def get(self, key: str) -> str | None:
        if self._client:
            try:
                return self._client.get(key)
            except UnicodeDecodeError as exc:
                logger.warning("Stored value for %s is not valid UTF-8: %s", key, exc)
                return None
            except _REDIS_ERRORS as exc:
                self._switch_to_memory_fallback(exc)
        return self._memory.get(key)

    def set(self, key: str, value: str) -> bool:
        """Store ``value``; returns False when the write only reached memory."""
        if self._client:
            try:
                self._client.set(key, value)
                return True
            except _REDIS_ERRORS as exc:
                self._switch_to_memory_fallback(exc)
        self._memory[key] = value
        return False

    def delete(self, key: str) -> bool:
        self._memory.pop(key, None)
        if self._client:
            try:
                self._client.delete(key)
                return True
            except _REDIS_ERRORS as exc:
                self._switch_to_memory_fallback(exc)
        return False

    def get_json(self, key: str, default: Any = None) -> Any:
        """Decode a stored JSON value, degrading to ``default`` when unreadable."""
        raw = self.get(key)
        if raw is None or raw == "":
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError, RecursionError) as exc:
            logger.warning("Failed to parse stored value for %s: %s", key, exc)
            return default

    def set_json(self, key: str, value: Any) -> bool:
        return self.set(key, json.dumps(value, ensure_ascii=False))
