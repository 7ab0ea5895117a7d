from __future__ import annotations

from fastapi.testclient import TestClient


def test_app_smoke_routes(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

    r = client.get("/api/categories")
    assert r.status_code == 200
    assert r.json() == []

    r = client.get("/api/products")
    assert r.status_code == 200
    assert r.json() == []


def test_default_database_lives_under_project_data_dir(sandbox_project):
    import app as app_module

    app = app_module.create_app()
    services = app.state.services
    assert services.settings.database_path == sandbox_project / "data" / "database.json"

    client = TestClient(app)
    r = client.post(
        "/api/auth/register",
        json={"name": "Ann", "email": "a@x.com", "password": "secret"},
    )
    assert r.status_code == 201
    assert (sandbox_project / "data" / "database.json").exists()


def test_database_path_from_environment(sandbox_project, monkeypatch):
    from settings import get_settings

    target = sandbox_project / "elsewhere" / "db.json"
    monkeypatch.setenv("DATABASE_PATH", str(target))
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")
    monkeypatch.setenv("VERIFICATION_METHOD", "WhatsApp")

    s = get_settings()
    assert s.database_path == target
    assert s.bcrypt_rounds == 5
    assert s.verification_method == "whatsapp"
