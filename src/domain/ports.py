"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.

Storage is split per aggregate so that each service depends only on
the capability it uses; the registration flow sees AccountRepository
and nothing else.
"""

from datetime import timedelta
from typing import Protocol, TypeVar

from .models import (
    Category,
    SubCategory,
    TokenPair,
    UserAccount,
    UserLocation,
    UserProfile,
    Xozmak,
)

EntityT = TypeVar("EntityT", Xozmak, Category, SubCategory)


class VerificationCache(Protocol):
    """Port interface for pending phone verification codes."""

    def get(self, phone_number: str) -> str | None:
        """
        Look up the pending code for a phone number.

        Returns:
            The stored code, or None when no code is pending or it expired

        Raises:
            VerificationUnavailable: If the cache cannot be reached
        """
        ...

    def set(self, phone_number: str, code: str, ttl_seconds: int) -> None:
        """
        Store a code, replacing any code already pending for the number.

        Raises:
            VerificationUnavailable: If the cache cannot be reached
        """
        ...


class SmsSender(Protocol):
    """Port interface for verification code delivery."""

    def send_verification_code(self, phone_number: str, code: str) -> None:
        ...


class TokenIssuer(Protocol):
    """Port interface for signed identity tokens."""

    def mint(self, claims: dict[str, str], ttl: timedelta) -> str:
        """
        Sign claims plus issued_at / expires_at.

        Raises:
            SigningError: If the key is empty or the claims cannot be encoded
        """
        ...

    def issue_pair(self, claims: dict[str, str]) -> TokenPair:
        """
        Mint an access token and a refresh token for the same claims.

        Raises:
            SigningError: If either token cannot be signed
        """
        ...

    def verify(self, token: str) -> dict:
        """
        Verify a token and return its claims.

        Empty tokens and Basic credentials yield {"role": "unauthorized"}.

        Raises:
            InvalidToken: Expired, malformed or wrongly signed token
        """
        ...


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def create_account(self, account: UserAccount) -> None:
        """
        Insert a new account row.

        Raises:
            AccountAlreadyExists: If the phone number is already registered
            PersistenceError: On any other database failure
        """
        ...

    def delete_account(self, account_id: str) -> None:
        """
        Physically remove an account that never received credentials.

        Raises:
            PersistenceError: On database failure
        """
        ...


class ProfileRepository(Protocol):
    def get_profile(self, user_id: str) -> UserProfile:
        ...

    def update_profile(self, profile: UserProfile) -> None:
        ...


class LocationRepository(Protocol):
    def insert_location(self, location: UserLocation) -> None:
        ...

    def list_locations(self, user_id: str) -> list[UserLocation]:
        ...


class CatalogRepository(Protocol[EntityT]):
    """
    Port interface shared by the soft-deletable catalog tables.

    All catalog repositories share the same error contract:
    AlreadyExists, ReferenceNotFound, RowsAffectedZero, PersistenceError.
    """

    def create(self, entity: EntityT) -> None:
        ...

    def list_active(self) -> list[EntityT]:
        ...

    def update(self, entity: EntityT) -> None:
        ...

    def soft_delete(self, entity_id: str) -> None:
        ...


class XozmakRepository(CatalogRepository[Xozmak], Protocol):
    """Port interface for xozmak listings."""


class CategoryRepository(CatalogRepository[Category], Protocol):
    """Port interface for listing categories."""


class SubCategoryRepository(CatalogRepository[SubCategory], Protocol):
    """Port interface for listing sub-categories."""
