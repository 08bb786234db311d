from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from job_portal.database import Base
from job_portal.errors import DatabaseConnectionError
from job_portal.models import Admin, Job  # noqa: F401 - registers tables on Base.metadata


logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_EMAIL = "admin@jobportal.com"
# bcrypt, cost 10. Plaintext is "password".
DEFAULT_ADMIN_PASSWORD_HASH = "$2a$10$92IXUNpkjO0rOQ5byMi.Ye4oKoEa3Ro9llC/.og/at2.uheWG/igi"


def check_connectivity(engine: Engine) -> None:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as exc:  # noqa: BLE001 - any driver failure means the DB is unreachable
        raise DatabaseConnectionError(f"Database connection failed: {type(exc).__name__}: {exc}") from exc


def ensure_schema(engine: Engine) -> None:
    """Create the ``admins`` and ``jobs`` tables if they do not exist yet."""

    Base.metadata.create_all(bind=engine)


def seed_default_admin(db: Session) -> bool:
    """Insert the default admin unless one with the same username exists.

    Returns True when a row was inserted. Existing rows are never modified.
    """

    existing = db.query(Admin.id).filter(Admin.username == DEFAULT_ADMIN_USERNAME).first()
    if existing is not None:
        return False
    db.add(
        Admin(
            username=DEFAULT_ADMIN_USERNAME,
            password=DEFAULT_ADMIN_PASSWORD_HASH,
            email=DEFAULT_ADMIN_EMAIL,
        )
    )
    try:
        db.commit()
    except IntegrityError:
        # Another process seeded it first.
        db.rollback()
        return False
    logger.info("Seeded default admin username=%s", DEFAULT_ADMIN_USERNAME)
    return True


def initialize_database(engine: Engine, db: Session) -> None:
    check_connectivity(engine)
    logger.info("Database connection successful")
    ensure_schema(engine)
    seed_default_admin(db)
    logger.info("Database initialized")
