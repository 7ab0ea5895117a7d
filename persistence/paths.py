from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    # persistence/paths.py -> persistence -> project root
    return Path(__file__).resolve().parents[1]


def default_database_path() -> Path:
    # The parent directory is created on first write.
    return project_root() / "data" / "database.json"
