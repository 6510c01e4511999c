"""
Domain exceptions - Semantic error types for registration, tokens and storage.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Adapters wrap driver exceptions into these types; the API layer
translates them into HTTP status codes in one place.
"""


class DeliveryError(Exception):
    """Base class for all domain errors."""

    pass


class OperationCancelled(DeliveryError):
    """The caller cancelled the operation before the next step started."""

    pass


# Registration flow


class RegistrationError(DeliveryError):
    """Base class for registration domain errors."""

    pass


class InvalidOrExpiredCode(RegistrationError):
    """No pending verification code exists for the phone number."""

    pass


class InvalidCode(RegistrationError):
    """Submitted code does not match the pending verification code."""

    pass


class AccountAlreadyExists(RegistrationError):
    """An account is already registered for the phone number."""

    pass


class VerificationUnavailable(RegistrationError):
    """The verification cache could not be reached."""

    pass


class TokenIssuanceError(RegistrationError):
    """Access or refresh token could not be minted."""

    pass


# Tokens


class SigningError(DeliveryError):
    """Token could not be signed (empty key or unserializable claims)."""

    pass


class InvalidToken(DeliveryError):
    """Token was rejected during verification."""

    pass


class TokenExpired(InvalidToken):
    """Token signature is valid but its expires_at has passed."""

    pass


class MalformedToken(InvalidToken):
    """Token is unparsable, has a bad signature, or lacks required claims."""

    pass


# Storage


class StorageError(DeliveryError):
    """Base class for relational store errors."""

    pass


class AlreadyExists(StorageError):
    """Unique constraint violation."""

    pass


class ReferenceNotFound(StorageError):
    """Foreign key violation - the referenced row does not exist."""

    pass


class NotFound(StorageError):
    """Requested row does not exist (or is soft-deleted)."""

    pass


class RowsAffectedZero(StorageError):
    """Write statement matched no rows."""

    pass


class PersistenceError(StorageError):
    """Any other database failure."""

    pass
