from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

from job_portal.config import Settings, build_sqlalchemy_db_url, missing_required_settings, parse_cors_origins
from job_portal.database import create_db_engine, create_session_factory
from job_portal.db.bootstrap import check_connectivity, ensure_schema, seed_default_admin
from job_portal.errors import DatabaseConnectionError
from job_portal.main import create_app
from job_portal.models.admin import Admin


def test_startup_creates_tables_and_seeds_admin(client) -> None:
    engine = client.app.state.engine
    tables = set(inspect(engine).get_table_names())
    assert {"admins", "jobs"} <= tables

    with client.app.state.session_factory() as db:
        admins = db.query(Admin).all()
    assert [(a.username, a.email) for a in admins] == [("admin", "admin@jobportal.com")]


def test_restart_never_overwrites_existing_admin(settings) -> None:
    with TestClient(create_app(settings)) as c:
        with c.app.state.session_factory() as db:
            admin = db.query(Admin).filter(Admin.username == "admin").one()
            admin.email = "changed@example.com"
            db.commit()

    with TestClient(create_app(settings)) as c:
        with c.app.state.session_factory() as db:
            admins = db.query(Admin).all()
    assert len(admins) == 1
    assert admins[0].email == "changed@example.com"


def test_seed_default_admin_is_idempotent(tmp_path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'seed.db'}")
    ensure_schema(engine)
    ensure_schema(engine)
    with create_session_factory(engine)() as db:
        assert seed_default_admin(db) is True
        assert seed_default_admin(db) is False
        assert db.query(Admin).count() == 1
    engine.dispose()


def test_check_connectivity_raises_for_unreachable_database(tmp_path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'missing-dir' / 'db.sqlite'}")
    with pytest.raises(DatabaseConnectionError):
        check_connectivity(engine)


def test_startup_aborts_without_required_config(tmp_path) -> None:
    settings = Settings(_env_file=None, DB_URL=f"sqlite:///{tmp_path / 'x.db'}", JWT_SECRET="")
    with pytest.raises(RuntimeError):
        with TestClient(create_app(settings)):
            pass


def test_startup_aborts_when_database_is_unreachable(tmp_path) -> None:
    settings = Settings(
        _env_file=None,
        DB_URL=f"sqlite:///{tmp_path / 'missing-dir' / 'db.sqlite'}",
        JWT_SECRET="s",
    )
    with pytest.raises(RuntimeError):
        with TestClient(create_app(settings)):
            pass


def test_missing_required_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "DB_URL", "DB_HOST", "DB_PORT", "DB_NAME", "DB_USER", "DB_PASSWORD", "JWT_SECRET"):
        monkeypatch.delenv(name, raising=False)

    assert missing_required_settings(Settings(_env_file=None)) == [
        "DB_HOST",
        "DB_PORT",
        "DB_NAME",
        "DB_USER",
        "DB_PASSWORD",
        "JWT_SECRET",
    ]
    complete = Settings(
        _env_file=None,
        DB_HOST="db",
        DB_PORT="3306",
        DB_NAME="job_portal",
        DB_USER="app",
        DB_PASSWORD="pw",
        JWT_SECRET="s",
    )
    assert missing_required_settings(complete) == []
    assert build_sqlalchemy_db_url(complete) == "mysql+pymysql://app:pw@db:3306/job_portal?charset=utf8mb4"
    assert complete.port == 5000


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ["*"]),
        ("", ["*"]),
        ("*", ["*"]),
        ("http://a.test, http://b.test ,", ["http://a.test", "http://b.test"]),
    ],
)
def test_parse_cors_origins(raw, expected) -> None:
    assert parse_cors_origins(raw) == expected


def test_mysql_engine_uses_bounded_pool() -> None:
    settings = Settings(_env_file=None, DB_URL="mysql+pymysql://app:pw@db:3306/job_portal", JWT_SECRET="s")
    engine = create_db_engine(settings)
    try:
        assert engine.pool.size() == 20
        assert engine.pool._max_overflow == 0
        assert engine.pool._timeout == 2.0
        assert engine.pool._recycle == 3600
    finally:
        engine.dispose()


def test_blank_db_port_counts_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DB_URL", raising=False)
    monkeypatch.setenv("DB_PORT", "")
    settings = Settings(_env_file=None, DB_HOST="db", DB_NAME="n", DB_USER="u", DB_PASSWORD="p", JWT_SECRET="s")
    assert settings.db_port is None
    assert missing_required_settings(settings) == ["DB_PORT"]
