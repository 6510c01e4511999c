"""
Registration domain service - Phone verification and token issuance.

This module contains the core business logic for user registration.

Flow
====

send_code:
    generate code -> cache.set(phone, code, ttl) -> sms.send

register:
    cache.get(phone)          missing        -> InvalidOrExpiredCode
                              cache outage   -> VerificationUnavailable
    compare codes             mismatch       -> InvalidCode
                              (bypass code accepted only when configured)
    accounts.create_account   duplicate      -> AccountAlreadyExists
                              other failure  -> PersistenceError
    tokens.issue_pair         signing failure-> TokenIssuanceError
                              (account row is deleted first)

Cancellation after the account insert also deletes the account row.

Every step is synchronous and runs at most once; nothing is retried.
Two concurrent registrations for the same phone number race on the
store's unique constraint, so exactly one of them wins.
"""

import logging
import secrets
import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import (
    InvalidCode,
    InvalidOrExpiredCode,
    OperationCancelled,
    PersistenceError,
    SigningError,
    TokenIssuanceError,
)
from .models import USER_ROLE, RegistrationResult, UserAccount
from .ports import AccountRepository, SmsSender, TokenIssuer, VerificationCache

logger = logging.getLogger(__name__)

CODE_LENGTH = 6


@dataclass
class RegistrationService:
    """
    Domain service for phone-number registration.

    Orchestrates the registration flow: cache lookup, code comparison,
    account persistence and token issuance.
    """

    cache: VerificationCache
    accounts: AccountRepository
    tokens: TokenIssuer
    sms_sender: SmsSender
    code_ttl_seconds: int = 120
    bypass_code: str | None = None
    id_factory: Callable[[], str] = lambda: str(uuid.uuid4())

    def send_code(self, phone_number: str) -> int:
        """
        Issue a fresh verification code for a phone number.

        A new code overwrites any code still pending for the number.

        Returns:
            Code lifetime in seconds

        Raises:
            VerificationUnavailable: If the cache cannot be reached
        """
        code = self._generate_verification_code()
        self.cache.set(phone_number, code, self.code_ttl_seconds)
        self.sms_sender.send_verification_code(phone_number, code)
        logger.info("Verification code issued for %s", phone_number)
        return self.code_ttl_seconds

    def register(
        self,
        phone_number: str,
        code: str,
        fcm_token: str,
        cancel_event: threading.Event | None = None,
    ) -> RegistrationResult:
        """
        Register a new account after checking the verification code.

        Args:
            phone_number: Phone number the code was sent to
            code: Code submitted by the user
            fcm_token: Push-notification registration handle
            cancel_event: Optional signal checked before each step

        Returns:
            RegistrationResult with the new account id and token pair

        Raises:
            InvalidOrExpiredCode: No pending code for the phone number
            InvalidCode: Submitted code does not match
            VerificationUnavailable: Cache outage
            AccountAlreadyExists: Phone number already registered
            PersistenceError: Other store failure
            TokenIssuanceError: Token signing failed
            OperationCancelled: cancel_event was set before a step began
        """
        logger.info("Registration started: phone_number=%s", phone_number)

        self._check_cancelled(cancel_event)
        stored_code = self.cache.get(phone_number)
        if stored_code is None:
            raise InvalidOrExpiredCode(phone_number)

        if not self._code_matches(stored_code, code):
            raise InvalidCode(phone_number)

        self._check_cancelled(cancel_event)
        account = UserAccount(
            id=self.id_factory(),
            phone_number=phone_number,
            fcm_token=fcm_token,
        )
        self.accounts.create_account(account)

        try:
            self._check_cancelled(cancel_event)
        except OperationCancelled:
            self._discard_account(account.id)
            raise

        try:
            tokens = self.tokens.issue_pair({"id": account.id, "role": USER_ROLE})
        except SigningError as exc:
            logger.error("Token issuance failed for account %s: %s", account.id, exc)
            self._discard_account(account.id)
            raise TokenIssuanceError(account.id) from exc

        logger.info("Registration finished: id=%s", account.id)
        return RegistrationResult(id=account.id, tokens=tokens)

    def _code_matches(self, stored_code: str, submitted_code: str) -> bool:
        """
        Compare codes in constant time; fall back to the bypass code if set.
        """
        if secrets.compare_digest(stored_code.encode(), submitted_code.encode()):
            return True
        if self.bypass_code and secrets.compare_digest(
            self.bypass_code.encode(), submitted_code.encode()
        ):
            logger.warning("Bypass verification code used")
            return True
        return False

    def _discard_account(self, account_id: str) -> None:
        """Remove an account that ended up without credentials."""
        try:
            self.accounts.delete_account(account_id)
        except PersistenceError:
            logger.exception("Could not remove orphaned account %s", account_id)

    def _check_cancelled(self, cancel_event: threading.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise OperationCancelled("registration cancelled")

    def _generate_verification_code(self) -> str:
        """
        Generate a cryptographically secure numeric verification code.

        Returns string to preserve leading zeros.
        """
        return "".join(secrets.choice("0123456789") for _ in range(CODE_LENGTH))
