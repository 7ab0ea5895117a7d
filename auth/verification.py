from __future__ import annotations

import logging
from typing import Protocol

from pydantic import BaseModel

from persistence.records import UserRecord

logger = logging.getLogger(__name__)


class VerificationResult(BaseModel):
    method: str
    verified: bool


class VerificationStrategy(Protocol):
    """Post-registration notification channel."""

    method: str

    def verify(self, user: UserRecord) -> VerificationResult:
        ...


class EmailVerificationStrategy:
    method = "email"

    def verify(self, user: UserRecord) -> VerificationResult:
        # No mail is sent; delivery is outside this service.
        logger.info("Email verification sent to: %s", user.email)
        return VerificationResult(method=self.method, verified=True)


class WhatsAppVerificationStrategy:
    method = "whatsapp"

    def verify(self, user: UserRecord) -> VerificationResult:
        logger.info("WhatsApp verification sent to: %s", user.email)
        return VerificationResult(method=self.method, verified=True)


STRATEGIES: dict[str, type] = {
    EmailVerificationStrategy.method: EmailVerificationStrategy,
    WhatsAppVerificationStrategy.method: WhatsAppVerificationStrategy,
}


def strategy_for(method: str) -> VerificationStrategy:
    try:
        return STRATEGIES[method.strip().lower()]()
    except KeyError:
        raise ValueError(f"unknown verification method: {method!r}") from None
