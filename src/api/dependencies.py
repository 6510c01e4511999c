"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.

Long-lived clients (connection pool, redis client, token issuer) are
built once in the app lifespan and read back from app.state here.
"""

from typing import Annotated

import redis
from fastapi import Depends, Header, HTTPException, Request, status
from psycopg_pool import ConnectionPool

from src.adapters.cache.redis_cache import RedisVerificationCache
from src.adapters.repository.catalog import (
    PostgresCategoryRepository,
    PostgresSubCategoryRepository,
    PostgresXozmakRepository,
)
from src.adapters.repository.postgres import (
    PostgresAccountRepository,
    PostgresLocationRepository,
    PostgresProfileRepository,
)
from src.adapters.sms.console import ConsoleSmsSender
from src.config.settings import Settings, get_settings
from src.domain.catalog import CategoryService, SubCategoryService, XozmakService
from src.domain.models import UNAUTHORIZED_ROLE
from src.domain.ports import TokenIssuer
from src.domain.profiles import LocationService, ProfileService
from src.domain.registration import RegistrationService

# Module-level singleton - ConsoleSmsSender is stateless
_sms_sender = ConsoleSmsSender()

BEARER_SCHEME = "bearer"


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_redis_client(request: Request) -> redis.Redis:
    return request.app.state.redis


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_sms_sender() -> ConsoleSmsSender:
    """Get console SMS sender (singleton)."""
    return _sms_sender


def get_registration_service(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the verification cache, account repository,
    token issuer and SMS sender for the domain service.
    """
    return RegistrationService(
        cache=RedisVerificationCache(get_redis_client(request)),
        accounts=PostgresAccountRepository(get_pool(request)),
        tokens=get_token_issuer(request),
        sms_sender=get_sms_sender(),
        code_ttl_seconds=settings.verification_ttl_seconds,
        bypass_code=settings.verification_bypass_code,
    )


def get_profile_service(request: Request) -> ProfileService:
    return ProfileService(PostgresProfileRepository(get_pool(request)))


def get_location_service(request: Request) -> LocationService:
    return LocationService(PostgresLocationRepository(get_pool(request)))


def get_xozmak_service(request: Request) -> XozmakService:
    return XozmakService(PostgresXozmakRepository(get_pool(request)))


def get_category_service(request: Request) -> CategoryService:
    return CategoryService(PostgresCategoryRepository(get_pool(request)))


def get_sub_category_service(request: Request) -> SubCategoryService:
    return SubCategoryService(PostgresSubCategoryRepository(get_pool(request)))


def extract_token(authorization: str | None) -> str:
    """
    Pull the raw token out of an Authorization header value.

    "Bearer <jwt>" and a bare "<jwt>" both work; the scheme name is
    matched case-insensitively. Missing headers give "", and Basic
    credentials are passed through for the issuer to treat as anonymous.
    """
    if not authorization:
        return ""
    authorization = authorization.strip()
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        return credentials.strip()
    return authorization


def get_claims(
    authorization: Annotated[str | None, Header()] = None,
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict:
    """
    Optional authentication.

    Returns {"role": "unauthorized"} for anonymous callers; a present but
    invalid token raises InvalidToken (translated to 401).
    """
    return issuer.verify(extract_token(authorization))


def get_current_user_id(claims: dict = Depends(get_claims)) -> str:
    """
    Required authentication - the caller's account id.

    Raises:
        HTTPException: 401 for anonymous callers
    """
    user_id = claims.get("id")
    if claims.get("role") == UNAUTHORIZED_ROLE or not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
