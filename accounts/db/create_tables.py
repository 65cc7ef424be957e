"""Utility script to create the schema and seed the authority catalog."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from accounts.core.config import get_settings
from accounts.domain.errors import StoreUnavailableError
from accounts.repositories.sql_repository import AuthorityRepository

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(seed_authorities: bool = True) -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    if seed_authorities:
        AuthorityRepository().ensure_authorities(get_settings().default_authorities)


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except (SQLAlchemyError, StoreUnavailableError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
