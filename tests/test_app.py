from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from job_portal.main import create_app
from job_portal.routers import admin as admin_router


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "OK"


def test_unknown_route_is_404_json(client) -> None:
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"message": "API endpoint not found"}

    r = client.post("/health")
    assert r.status_code == 404
    assert r.json() == {"message": "API endpoint not found"}


def test_non_integer_job_id_is_rejected(client) -> None:
    r = client.get("/api/jobs/abc")
    assert r.status_code == 400
    assert r.json() == {"message": "Dữ liệu không hợp lệ"}


def test_security_headers_are_set(client) -> None:
    r = client.get("/health")
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["X-XSS-Protection"] == "1; mode=block"


def test_cors_allows_any_origin_by_default(client) -> None:
    r = client.get("/health", headers={"Origin": "http://example.com"})
    assert r.headers["access-control-allow-origin"] in ("*", "http://example.com")


def test_cors_origin_list_is_enforced(settings) -> None:
    locked = settings.model_copy(update={"cors_origin": "http://allowed.test"})
    with TestClient(create_app(locked)) as c:
        allowed = c.get("/health", headers={"Origin": "http://allowed.test"})
        denied = c.get("/health", headers={"Origin": "http://other.test"})
    assert allowed.headers["access-control-allow-origin"] == "http://allowed.test"
    assert "access-control-allow-origin" not in denied.headers


def test_datastore_failure_is_generic_500(app, auth_headers, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(db):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(admin_router, "build_admin_stats", broken)
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/admin/stats", headers=auth_headers)
    assert r.status_code == 500
    assert r.json() == {"message": "Lỗi server"}
    assert "connection refused" not in r.text


def test_unexpected_failure_is_generic_500(app, auth_headers, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(db):
        raise KeyError("secret detail")

    monkeypatch.setattr(admin_router, "build_admin_stats", broken)
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/admin/stats", headers={**auth_headers, "Origin": "http://example.com"})
    assert r.status_code == 500
    assert r.json() == {"message": "Something went wrong!"}
    assert "secret detail" not in r.text
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["access-control-allow-origin"] == "*"


def test_unexpected_failure_respects_locked_cors_origins(settings, auth_headers, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(db):
        raise KeyError("boom")

    monkeypatch.setattr(admin_router, "build_admin_stats", broken)
    locked = settings.model_copy(update={"cors_origin": "http://allowed.test"})
    with TestClient(create_app(locked), raise_server_exceptions=False) as c:
        allowed = c.get("/api/admin/stats", headers={**auth_headers, "Origin": "http://allowed.test"})
        denied = c.get("/api/admin/stats", headers={**auth_headers, "Origin": "http://other.test"})
    assert allowed.status_code == denied.status_code == 500
    assert allowed.headers["access-control-allow-origin"] == "http://allowed.test"
    assert "access-control-allow-origin" not in denied.headers
    assert denied.headers["X-XSS-Protection"] == "1; mode=block"
