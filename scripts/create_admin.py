from __future__ import annotations

import argparse
import secrets
import string
import sys

from job_portal.config import get_settings, missing_required_settings
from job_portal.database import create_db_engine, create_session_factory
from job_portal.db.bootstrap import ensure_schema
from job_portal.models.admin import Admin
from job_portal.utils.password_hash import hash_password


def _generate_password(length: int = 20) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Create an additional admin account. "
            "Existing accounts are never modified."
        )
    )
    parser.add_argument("--username", required=True, help="Admin username (unique)")
    parser.add_argument("--email", required=True, help="Admin email (unique)")
    parser.add_argument("--password", default=None, help="Admin password (generated if omitted)")

    args = parser.parse_args(argv)

    settings = get_settings()
    missing = [name for name in missing_required_settings(settings) if name != "JWT_SECRET"]
    if missing:
        sys.stderr.write(f"Missing required environment variables: {', '.join(missing)}\n")
        return 1

    engine = create_db_engine(settings)
    ensure_schema(engine)
    password = args.password or _generate_password()

    try:
        with create_session_factory(engine)() as db:
            clash = (
                db.query(Admin)
                .filter((Admin.username == args.username) | (Admin.email == args.email))
                .first()
            )
            if clash is not None:
                sys.stderr.write(f"admin already exists username={clash.username} email={clash.email}\n")
                return 1

            admin = Admin(username=args.username, email=args.email, password=hash_password(password))
            db.add(admin)
            db.commit()
            db.refresh(admin)
    finally:
        engine.dispose()

    print(f"created admin id={admin.id} username={args.username}")
    if args.password is None:
        # Print the password so the operator can log in immediately.
        print(f"generated password: {password}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
