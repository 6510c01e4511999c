"""
JWT token issuer adapter - Implements TokenIssuer protocol.

Tokens are HS256-signed JWTs carrying the caller's claims plus
`issued_at` and `expires_at` in unix seconds:

    {"id": "...", "role": "user", "issued_at": 1700000000, "expires_at": 1700086400}

Expiry is checked against `expires_at` by this adapter rather than by
PyJWT's registered `exp` claim, so the claim names stay stable on the wire.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from src.domain.exceptions import MalformedToken, SigningError, TokenExpired
from src.domain.models import UNAUTHORIZED_ROLE, TokenPair

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ANONYMOUS_MARKER = "Basic"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer:
    """
    Implements TokenIssuer protocol via PyJWT.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The clock is injectable so tokens are reproducible in tests.
    """

    def __init__(
        self,
        signing_key: str,
        access_ttl: timedelta = timedelta(hours=24),
        refresh_ttl: timedelta = timedelta(days=30),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._signing_key = signing_key
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl
        self._clock = clock

    def mint(self, claims: dict[str, str], ttl: timedelta) -> str:
        """
        Sign claims with issued_at = now and expires_at = now + ttl.

        Raises:
            SigningError: If the signing key is empty or encoding fails
        """
        if not self._signing_key:
            raise SigningError("signing key is empty")

        now = self._clock()
        payload: dict[str, object] = dict(claims)
        payload["issued_at"] = int(now.timestamp())
        payload["expires_at"] = int((now + ttl).timestamp())

        try:
            return jwt.encode(payload, self._signing_key, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise SigningError(str(exc)) from exc

    def issue_pair(self, claims: dict[str, str]) -> TokenPair:
        access_token = self.mint(claims, self.access_ttl)
        refresh_token = self.mint(claims, self.refresh_ttl)
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def verify(self, token: str) -> dict:
        """
        Verify signature and expiry, returning the token's claims.

        An empty token, or any token containing the Basic marker, is anonymous:
        the result is {"role": "unauthorized"} instead of an error.

        Raises:
            MalformedToken: Unparsable token, bad signature, missing expires_at
            TokenExpired: expires_at is in the past
        """
        if not token or ANONYMOUS_MARKER in token:
            return {"role": UNAUTHORIZED_ROLE}

        try:
            claims = jwt.decode(token, self._signing_key, algorithms=[ALGORITHM])
        except jwt.InvalidTokenError as exc:
            logger.info("Rejected token: %s", exc)
            raise MalformedToken(str(exc)) from exc

        expires_at = claims.get("expires_at")
        if not isinstance(expires_at, int):
            raise MalformedToken("expires_at claim missing")
        if expires_at < int(self._clock().timestamp()):
            raise TokenExpired(f"token expired at {expires_at}")

        return claims
