"""
Registration and login.

Users live in the "users" collection of the shared document store. Email is
unique by convention; this service is what enforces it.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping, TypedDict

from pydantic import ValidationError as PydanticValidationError

from errors import AlreadyExists, InvalidCredentials, InvalidToken, StorageError, ValidationError
from persistence.records import USERS, Role, UserRecord
from persistence.repositories import AsyncDocumentStore

from .passwords import PasswordHasher
from .tokens import TOKEN_TTL, TokenClaims, TokenIssuer
from .verification import EmailVerificationStrategy, VerificationResult, VerificationStrategy

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class RegisterResult(TypedDict):
    token: str
    user: dict[str, Any]
    verification: dict[str, Any]


class LoginResult(TypedDict):
    token: str
    user: dict[str, Any]


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()


def _parse_role(value: Any) -> Role:
    try:
        return Role(value)
    except ValueError:
        allowed = ", ".join(r.value for r in Role)
        raise ValidationError(f"role must be one of: {allowed}") from None


def _to_user(doc: Mapping[str, Any]) -> UserRecord:
    try:
        return UserRecord.from_disk_doc(doc)
    except PydanticValidationError as e:
        raise StorageError(f"malformed user record id={doc.get('id')!r}") from e


class AuthService:
    def __init__(
        self,
        store: AsyncDocumentStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        verification_strategy: VerificationStrategy | None = None,
    ):
        self._store = store
        self._hasher = hasher
        self._tokens = tokens
        self._verification = verification_strategy or EmailVerificationStrategy()

    @property
    def verification_strategy(self) -> VerificationStrategy:
        return self._verification

    def set_verification_strategy(self, strategy: VerificationStrategy) -> None:
        self._verification = strategy

    async def register(
        self,
        name: Any,
        email: Any,
        password: Any,
        role: Role | str = Role.customer,
    ) -> RegisterResult:
        name = _require_text(name, "name")
        email = _require_text(email, "email")
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")
        parsed_role = _parse_role(role)

        if await self._store.find_one(USERS, {"email": email}) is not None:
            raise AlreadyExists("User already exists")

        # bcrypt is deliberately slow; keep it off the event loop.
        hashed = await asyncio.to_thread(self._hasher.hash, password)

        # The lookup above is a fast path; this insert is what keeps emails unique.
        created = await self._store.create_unique(
            USERS,
            {
                "name": name,
                "email": email,
                "password": hashed,
                "role": parsed_role.value,
                "verified": False,
            },
            unique=("email",),
        )
        if created is None:
            raise AlreadyExists("User already exists")
        user = _to_user(created)
        logger.info("registered user id=%s role=%s", user.id, user.role.value)

        verification = self._dispatch_verification(user)

        return {
            "token": self._issue_for(user),
            "user": user.public_view(),
            "verification": verification.model_dump(),
        }

    async def login(self, email: Any, password: Any) -> LoginResult:
        if not isinstance(email, str) or not isinstance(password, str):
            raise InvalidCredentials(INVALID_CREDENTIALS)

        found = await self._store.find_one(USERS, {"email": email.strip()})
        if found is None:
            # Pay the same bcrypt cost as a wrong password so timing does not tell the two apart.
            await asyncio.to_thread(self._hasher.verify, password, self._hasher.dummy_digest())
            logger.info("login failed: unknown email")
            raise InvalidCredentials(INVALID_CREDENTIALS)

        user = _to_user(found)
        if not await asyncio.to_thread(self._hasher.verify, password, user.password):
            logger.info("login failed: wrong password for user id=%s", user.id)
            raise InvalidCredentials(INVALID_CREDENTIALS)

        return {"token": self._issue_for(user), "user": user.public_view()}

    def verify_token(self, token: str) -> TokenClaims:
        try:
            return self._tokens.verify(token)
        except InvalidToken as e:
            logger.debug("token rejected: %r", e.__cause__)
            raise InvalidToken("Invalid token") from None

    def _issue_for(self, user: UserRecord) -> str:
        claims = {"id": user.id, "email": user.email, "role": user.role.value}
        return self._tokens.issue(claims, TOKEN_TTL)

    def _dispatch_verification(self, user: UserRecord) -> VerificationResult:
        method = getattr(self._verification, "method", type(self._verification).__name__)
        try:
            return self._verification.verify(user)
        except Exception:
            # A failed notification never undoes a registration.
            logger.exception("verification via %s failed for user id=%s", method, user.id)
            return VerificationResult(method=method, verified=False)
