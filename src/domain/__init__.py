"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for phone-number
registration, token issuance and the admin catalog. It defines its own
port interfaces for infrastructure abstraction, ensuring true hexagonal
architecture decoupling.
"""

from .catalog import CategoryService, SubCategoryService, XozmakService
from .exceptions import (
    AccountAlreadyExists,
    AlreadyExists,
    DeliveryError,
    InvalidCode,
    InvalidOrExpiredCode,
    InvalidToken,
    NotFound,
    PersistenceError,
    RegistrationError,
    TokenIssuanceError,
    VerificationUnavailable,
)
from .models import RegistrationResult, TokenPair, UserAccount
from .ports import AccountRepository, SmsSender, TokenIssuer, VerificationCache
from .profiles import LocationService, ProfileService
from .registration import RegistrationService

__all__ = [
    "AccountAlreadyExists",
    "AccountRepository",
    "AlreadyExists",
    "CategoryService",
    "DeliveryError",
    "InvalidCode",
    "InvalidOrExpiredCode",
    "InvalidToken",
    "LocationService",
    "NotFound",
    "PersistenceError",
    "ProfileService",
    "RegistrationError",
    "RegistrationResult",
    "RegistrationService",
    "SmsSender",
    "SubCategoryService",
    "TokenIssuanceError",
    "TokenIssuer",
    "TokenPair",
    "UserAccount",
    "VerificationCache",
    "VerificationUnavailable",
    "XozmakService",
]
