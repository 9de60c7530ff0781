"""Database initialization and migrations."""

import aiosqlite
import os
from pathlib import Path
from typing import Optional
from database.models import (
    CREATE_LEADERBOARD_TABLE,
    CREATE_INDEXES,
    ADDED_COLUMNS
)
from dotenv import load_dotenv

load_dotenv()


def get_database_path() -> str:
    """Get the SQLite file path from the environment."""
    return os.getenv("DATABASE_PATH", "./data/reflex.db")


async def _add_missing_columns(db: aiosqlite.Connection):
    for table, column, column_type in ADDED_COLUMNS:
        async with db.execute(f"PRAGMA table_info({table})") as cursor:
            existing = {row[1] async for row in cursor}
        if column not in existing:
            await db.execute(f"ALTER TABLE {table} ADD COLUMN {column} {column_type}")
            print(f"[INFO] Added column {table}.{column}")


async def initialize_database(db_path: Optional[str] = None):
    """Initialize database with all tables."""
    db_path = db_path or get_database_path()

    # Create data directory if it doesn't exist
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as db:
        await db.execute(CREATE_LEADERBOARD_TABLE)
        await _add_missing_columns(db)

        # Create indexes
        for index_sql in CREATE_INDEXES:
            await db.execute(index_sql)

        await db.commit()
        print(f"Database initialized at {db_path}")
