"""
Unit tests for JwtTokenIssuer adapter.

Tests verify:
- Claims shape (caller claims + issued_at / expires_at)
- HS256 signing and determinism under a fixed clock
- Rejection of expired, malformed and wrongly signed tokens
- Anonymous claim set for empty and Basic credentials
"""

from datetime import timedelta

import jwt
import pytest

from src.adapters.tokens.jwt_issuer import JwtTokenIssuer
from src.domain.exceptions import (
    InvalidToken,
    MalformedToken,
    SigningError,
    TokenExpired,
)
from tests.conftest import FIXED_NOW, SIGNING_KEY, FakeClock

CLAIMS = {"id": "0b7c5d0e-31b2-4c4f-9d6c-5d1f0b6a2e11", "role": "user"}


class TestMint:
    """Tests for token minting."""

    def test_mint_returns_compact_jwt(self, token_issuer: JwtTokenIssuer) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        assert token.count(".") == 2

    def test_mint_uses_hs256(self, token_issuer: JwtTokenIssuer) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_mint_embeds_claims_and_timestamps(self, token_issuer: JwtTokenIssuer) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        payload = jwt.decode(token, SIGNING_KEY, algorithms=["HS256"])

        now = int(FIXED_NOW.timestamp())
        assert payload == {**CLAIMS, "issued_at": now, "expires_at": now + 300}

    def test_mint_is_deterministic_for_same_time(self, token_issuer: JwtTokenIssuer) -> None:
        first = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        second = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        assert first == second

    def test_mint_varies_with_time(
        self, token_issuer: JwtTokenIssuer, clock: FakeClock
    ) -> None:
        first = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        clock.advance(timedelta(seconds=1))
        second = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        assert first != second

    def test_empty_key_raises_signing_error(self) -> None:
        with pytest.raises(SigningError):
            JwtTokenIssuer("").mint(CLAIMS, timedelta(minutes=5))

    def test_unserializable_claims_raise_signing_error(
        self, token_issuer: JwtTokenIssuer
    ) -> None:
        with pytest.raises(SigningError):
            token_issuer.mint({"id": object()}, timedelta(minutes=5))  # type: ignore[dict-item]

    def test_issue_pair_uses_configured_ttls(self, token_issuer: JwtTokenIssuer) -> None:
        pair = token_issuer.issue_pair(CLAIMS)

        access = jwt.decode(pair.access_token, SIGNING_KEY, algorithms=["HS256"])
        refresh = jwt.decode(pair.refresh_token, SIGNING_KEY, algorithms=["HS256"])

        now = int(FIXED_NOW.timestamp())
        assert access["expires_at"] == now + 15 * 60
        assert refresh["expires_at"] == now + 7 * 24 * 60 * 60


class TestVerify:
    """Tests for token verification."""

    def test_round_trip_returns_input_claims(self, token_issuer: JwtTokenIssuer) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(minutes=5))

        claims = token_issuer.verify(token)

        now = int(FIXED_NOW.timestamp())
        assert {k: claims[k] for k in CLAIMS} == CLAIMS
        assert claims["issued_at"] <= now <= claims["expires_at"]

    def test_token_valid_until_expiry_second(
        self, token_issuer: JwtTokenIssuer, clock: FakeClock
    ) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        clock.advance(timedelta(minutes=5))
        assert token_issuer.verify(token)["id"] == CLAIMS["id"]

    def test_expired_token_rejected(
        self, token_issuer: JwtTokenIssuer, clock: FakeClock
    ) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        clock.advance(timedelta(minutes=5, seconds=1))

        with pytest.raises(TokenExpired):
            token_issuer.verify(token)

    def test_expired_is_an_invalid_token(
        self, token_issuer: JwtTokenIssuer, clock: FakeClock
    ) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(seconds=1))
        clock.advance(timedelta(hours=1))

        with pytest.raises(InvalidToken):
            token_issuer.verify(token)

    def test_wrong_key_rejected(self, token_issuer: JwtTokenIssuer, clock: FakeClock) -> None:
        token = token_issuer.mint(CLAIMS, timedelta(minutes=5))
        other = JwtTokenIssuer("another-signing-key-of-sufficient-size", clock=clock)

        with pytest.raises(MalformedToken):
            other.verify(token)

    def test_garbage_rejected(self, token_issuer: JwtTokenIssuer) -> None:
        with pytest.raises(MalformedToken):
            token_issuer.verify("not-a-jwt")

    def test_token_without_expiry_rejected(self, token_issuer: JwtTokenIssuer) -> None:
        token = jwt.encode(CLAIMS, SIGNING_KEY, algorithm="HS256")

        with pytest.raises(MalformedToken):
            token_issuer.verify(token)

    def test_other_algorithm_rejected(self, token_issuer: JwtTokenIssuer) -> None:
        payload = {**CLAIMS, "expires_at": int(FIXED_NOW.timestamp()) + 60}
        token = jwt.encode(payload, SIGNING_KEY, algorithm="HS512")

        with pytest.raises(MalformedToken):
            token_issuer.verify(token)

    def test_empty_token_is_anonymous(self, token_issuer: JwtTokenIssuer) -> None:
        assert token_issuer.verify("") == {"role": "unauthorized"}

    def test_basic_credentials_are_anonymous(self, token_issuer: JwtTokenIssuer) -> None:
        assert token_issuer.verify("Basic dXNlcjpwYXNz") == {"role": "unauthorized"}
