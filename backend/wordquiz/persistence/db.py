"""SQLite connection + schema initialisation."""
from __future__ import annotations
import logging
import os
import sqlite3
from typing import Optional

from wordquiz.core import config

logger = logging.getLogger(__name__)


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path or config.DATABASE_PATH, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def init_db(db_path: Optional[str] = None) -> None:
    """Run all migration SQL files, in name order, against the database."""
    db_path = db_path or config.DATABASE_PATH
    directory = os.path.dirname(db_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    migrations = sorted(f for f in os.listdir(config.MIGRATIONS_DIR) if f.endswith(".sql"))
    conn = get_connection(db_path)
    try:
        for name in migrations:
            with open(os.path.join(config.MIGRATIONS_DIR, name), "r", encoding="utf-8") as f:
                conn.executescript(f.read())
        conn.commit()
    finally:
        conn.close()
    logger.info("Database ready at %s (%d migration file(s))", db_path, len(migrations))
