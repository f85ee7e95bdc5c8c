"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ledgerpost.config import DB_PATH_ENV, OWNER_ENV
from ledgerpost.database.sqlalchemy_db import DEFAULT_OWNER, SQLAlchemyDatabase


def create_sqlite_database(
    database_path: Optional[str] = None, owner_id: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks LEDGERPOST_DB_PATH
            environment variable, then defaults to ~/.ledgerpost/ledgerpost.db
        owner_id: Owner the instance is scoped to. If None, checks LEDGERPOST_OWNER,
            then defaults to "default"

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        db_dir = Path.home() / ".ledgerpost"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "ledgerpost.db")

    if owner_id is None:
        owner_id = os.environ.get(OWNER_ENV, DEFAULT_OWNER)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url, owner_id=owner_id)
