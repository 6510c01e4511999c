"""Token adapters - Signed identity tokens."""

from .jwt_issuer import JwtTokenIssuer

__all__ = ["JwtTokenIssuer"]
