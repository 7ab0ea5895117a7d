"""
JWT token handling for authentication.

Tokens are HS256-signed by default and carry the user's id, email and role
plus `iat`/`exp`. Every token lives 24 hours.
"""
from __future__ import annotations

import logging
import time
from datetime import timedelta
from typing import Any, Mapping

import jwt
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from errors import InvalidToken
from persistence.records import Role

logger = logging.getLogger(__name__)

TOKEN_TTL = timedelta(hours=24)


class TokenClaims(BaseModel):
    """Token payload model."""

    model_config = ConfigDict(extra="allow")

    id: int
    email: str
    role: Role
    iat: int | None = None
    exp: int


def _mask_token(token: str, *, head: int = 16, tail: int = 8) -> str:
    if not token:
        return ""
    if len(token) <= head + tail + 3:
        return token
    return f"{token[:head]}...{token[-tail:]}"


class TokenIssuer:
    """
    Signs and verifies identity tokens.

    The signing key is fixed for the lifetime of the issuer; a new key
    invalidates every token issued with the old one.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", *, debug_log_tokens: bool = False):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._debug_log_tokens = debug_log_tokens

    def issue(self, claims: Mapping[str, Any], ttl: timedelta = TOKEN_TTL) -> str:
        """
        Create a signed token.

        Args:
            claims: Payload data to include in the token (at least id, email, role)
            ttl: Lifetime of the token, 24 hours unless overridden

        Returns:
            Encoded JWT token string
        """
        now = int(time.time())
        payload = {**claims, "iat": now, "exp": now + int(ttl.total_seconds())}
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        if self._debug_log_tokens:
            # WARNING: This logs part of a bearer token. Use only for local debugging.
            logger.debug("ISSUED JWT: id=%s role=%s", claims.get("id"), claims.get("role"))
            logger.debug("ISSUED JWT (masked): %s", _mask_token(token))
        return token

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            InvalidToken: bad signature, malformed, missing `exp`, or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidToken("Invalid token") from e
        try:
            return TokenClaims.model_validate(payload)
        except PydanticValidationError as e:
            raise InvalidToken("Invalid token") from e
