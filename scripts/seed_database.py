"""Populate default content, skills, experiences and projects if empty.

Usage: python scripts/seed_database.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from app.config import build_sqlalchemy_db_url, settings  # noqa: E402
from app.database import Base, SessionLocal, engine, mask_db_url  # noqa: E402
import app.models  # noqa: F401,E402  # ensure all models are registered
from app.services.seed_service import seed_store  # noqa: E402
from app.storage import SqlStore  # noqa: E402


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    db_url = build_sqlalchemy_db_url(settings)
    print("Seeding database with initial content:", mask_db_url(db_url))
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)

    try:
        with SessionLocal() as db:
            report = seed_store(SqlStore(db))
    except Exception as exc:  # noqa: BLE001 - report and exit non-zero on any failure
        print(f"Error during database seeding: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(
        "admin_created={} sections={} skills={} experiences={} projects={}".format(
            report.admin_created,
            ",".join(report.sections_created) or "-",
            report.skills_created,
            report.experiences_created,
            report.projects_created,
        )
    )
    print("Database seeding completed successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
