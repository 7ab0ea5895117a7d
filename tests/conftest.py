from __future__ import annotations

import dataclasses
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

TEST_JWT_SECRET = "test-only-secret-0123456789abcdef"


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect persistence paths to a temp project directory so tests never touch real ./data.
    """
    import persistence.paths as paths

    def _project_root() -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "project_root", _project_root)
    monkeypatch.delenv("DATABASE_PATH", raising=False)
    return tmp_path


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "database.json"


@pytest.fixture
def store(db_path: Path):
    from persistence import CollectionStore, DiskJsonDocumentStore

    return CollectionStore(DiskJsonDocumentStore(db_path))


@pytest.fixture
def async_store(store):
    from persistence import AsyncCollectionStore

    return AsyncCollectionStore(store)


@pytest.fixture
def token_issuer():
    from auth.tokens import TokenIssuer

    return TokenIssuer(TEST_JWT_SECRET)


@pytest.fixture
def auth_service(async_store, token_issuer):
    from auth.passwords import PasswordHasher
    from auth.service import AuthService

    return AuthService(async_store, PasswordHasher(rounds=4), token_issuer)


@pytest.fixture
def settings(sandbox_project: Path, db_path: Path):
    from settings import get_settings

    return dataclasses.replace(
        get_settings(),
        database_path=db_path,
        jwt_secret=TEST_JWT_SECRET,
        jwt_alg="HS256",
        bcrypt_rounds=4,
        verification_method="email",
        debug_log_requests=False,
    )


@pytest.fixture
def client(settings):
    from fastapi.testclient import TestClient

    import app as app_module

    return TestClient(app_module.create_app(settings))
