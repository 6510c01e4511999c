"""Cache adapters - Verification code storage."""

from .redis_cache import RedisVerificationCache, create_redis_client

__all__ = ["RedisVerificationCache", "create_redis_client"]
