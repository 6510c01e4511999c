"""
Domain entities - Plain dataclasses shared by services and adapters.

Optional fields left as None are treated as "not supplied" by the
update operations, which only touch columns that carry a value.
"""

from dataclasses import asdict, dataclass
from enum import Enum

USER_ROLE = "user"
UNAUTHORIZED_ROLE = "unauthorized"
# Verification codes as submitted by clients; a configured bypass code must match too.
CODE_PATTERN = r"^\d{4,6}$"


class EntityState(str, Enum):
    """
    Lifecycle flag for soft-deletable rows.

    Deleting a row flips it to INACTIVE; list queries return ACTIVE rows only.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class UserAccount:
    """Row created once per phone number at registration."""

    id: str
    phone_number: str
    fcm_token: str


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class RegistrationResult:
    id: str
    tokens: TokenPair


@dataclass
class UserProfile:
    id: str
    phone_number: str | None = None
    fcm_token: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None


@dataclass
class UserLocation:
    id: str
    user_id: str
    name: str
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None


@dataclass
class Xozmak:
    """Business listing managed by the admin panel."""

    id: str
    name: str | None = None
    description: str | None = None
    phone_number: str | None = None
    address: str | None = None
    image_url: str | None = None
    category_id: str | None = None
    created_by: str | None = None
    state: EntityState = EntityState.ACTIVE


@dataclass
class Category:
    id: str
    name: str | None = None
    image_url: str | None = None
    state: EntityState = EntityState.ACTIVE


@dataclass
class SubCategory:
    id: str
    category_id: str | None = None
    name: str | None = None
    image_url: str | None = None
    state: EntityState = EntityState.ACTIVE


def supplied_fields(entity: object, exclude: tuple[str, ...] = ("id",)) -> dict[str, object]:
    """Return the entity's non-None fields, minus the excluded keys."""
    values = asdict(entity)  # type: ignore[call-overload]
    return {
        key: (value.value if isinstance(value, Enum) else value)
        for key, value in values.items()
        if value is not None and key not in exclude
    }
