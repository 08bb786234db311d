from __future__ import annotations

import os
from datetime import datetime, timedelta
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Keep a developer's .env out of the test run.
    os.environ["ENVIRONMENT"] = "test"


TEST_SECRET = "test-secret"
ADMIN_USERNAME = "editor"
ADMIN_PASSWORD = "SecretPass123"
ADMIN_EMAIL = "editor@example.com"


@pytest.fixture()
def settings(tmp_path) -> Any:
    from job_portal.config import Settings

    return Settings(
        _env_file=None,
        DB_URL=f"sqlite:///{tmp_path / 'test.db'}",
        JWT_SECRET=TEST_SECRET,
    )


@pytest.fixture()
def app(settings) -> Any:
    from job_portal.main import create_app

    return create_app(settings)


@pytest.fixture()
def client(app) -> Any:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def session_factory(client) -> Any:
    return client.app.state.session_factory


@pytest.fixture()
def admin_account(session_factory) -> dict[str, Any]:
    from job_portal.models.admin import Admin
    from job_portal.utils.password_hash import hash_password

    with session_factory() as db:
        admin = Admin(username=ADMIN_USERNAME, password=hash_password(ADMIN_PASSWORD), email=ADMIN_EMAIL)
        db.add(admin)
        db.commit()
        db.refresh(admin)
        return {"id": admin.id, "username": ADMIN_USERNAME, "password": ADMIN_PASSWORD, "email": ADMIN_EMAIL}


@pytest.fixture()
def auth_headers(settings) -> dict[str, str]:
    from job_portal.utils.jwt_handler import create_access_token

    token = create_access_token({"id": 1, "username": "admin"}, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_job(session_factory) -> Callable[..., int]:
    """Insert a job row directly and return its id.

    Successive calls get strictly increasing ``created_at`` values so ordering is stable.
    """

    from job_portal.models.job import Job

    base = datetime(2024, 1, 1, 8, 0, 0)
    counter = {"n": 0}

    def _make(**overrides: Any) -> int:
        counter["n"] += 1
        stamp = base + timedelta(minutes=counter["n"])
        values: dict[str, Any] = {
            "title": f"Job {counter['n']}",
            "company": "Acme",
            "location": "Hanoi",
            "description": "Build things",
            "contact_email": "hr@acme.com",
            "created_at": stamp,
            "updated_at": stamp,
        }
        values.update(overrides)
        with session_factory() as db:
            job = Job(**values)
            db.add(job)
            db.commit()
            return job.id

    return _make

