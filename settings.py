from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Persistence
    database_path: Path

    # JWT
    jwt_secret: str
    jwt_alg: str

    # Password hashing
    bcrypt_rounds: int

    # Post-registration notification channel ("email" | "whatsapp")
    verification_method: str

    # HTTP
    cors_origins: list[str]

    # Debug
    debug_log_tokens: bool
    debug_log_requests: bool


def get_settings() -> Settings:
    from persistence.paths import default_database_path

    raw_db = os.getenv("DATABASE_PATH", "").strip()
    database_path = Path(raw_db) if raw_db else default_database_path()

    # NOTE: default is insecure; set JWT_SECRET in production
    jwt_secret = os.getenv("JWT_SECRET", "dev-only-super-secret")
    jwt_alg = os.getenv("JWT_ALG", "HS256")

    bcrypt_rounds = _env_int("BCRYPT_ROUNDS", 10)

    verification_method = os.getenv("VERIFICATION_METHOD", "email").strip().lower() or "email"

    cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    debug_log_tokens = _env_bool("DEBUG_LOG_TOKENS", False)
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", True)

    return Settings(
        database_path=database_path,
        jwt_secret=jwt_secret,
        jwt_alg=jwt_alg,
        bcrypt_rounds=bcrypt_rounds,
        verification_method=verification_method,
        cors_origins=cors_origins,
        debug_log_tokens=debug_log_tokens,
        debug_log_requests=debug_log_requests,
    )
