"""
Redis verification cache adapter - Implements VerificationCache protocol.

Pending codes are stored as plain string values keyed by phone number
with a Redis expiry, so an expired code simply reads back as missing.
"""

import logging

import redis

from src.domain.exceptions import VerificationUnavailable

logger = logging.getLogger(__name__)


class RedisVerificationCache:
    """
    Implements VerificationCache protocol via redis-py.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Every redis failure is reported as VerificationUnavailable so callers
    can tell an outage apart from a missing code.
    """

    def __init__(self, client: redis.Redis, key_prefix: str = "") -> None:
        """
        Args:
            client: redis client (decode_responses may be on or off)
            key_prefix: namespace prepended to phone numbers; empty keeps
                the bare phone number as key, shared with other code issuers
        """
        self._client = client
        self._key_prefix = key_prefix

    def get(self, phone_number: str) -> str | None:
        try:
            value = self._client.get(self._key(phone_number))
        except redis.RedisError as exc:
            logger.error("Verification cache read failed for %s: %s", phone_number, exc)
            raise VerificationUnavailable(phone_number) from exc

        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode()
        return value

    def set(self, phone_number: str, code: str, ttl_seconds: int) -> None:
        try:
            self._client.set(self._key(phone_number), code, ex=ttl_seconds)
        except redis.RedisError as exc:
            logger.error("Verification cache write failed for %s: %s", phone_number, exc)
            raise VerificationUnavailable(phone_number) from exc

    def _key(self, phone_number: str) -> str:
        return f"{self._key_prefix}{phone_number}"


def create_redis_client(url: str) -> redis.Redis:
    """Build a redis client that returns str values."""
    return redis.Redis.from_url(url, decode_responses=True)
