"""
Database configuration and schema management for NeonSnake.

This module provides database connection management with environment-aware
path selection (explicit path, Railway or local) and schema initialization.
"""

import logging
import os
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """
    Determine the appropriate database path based on environment.

    Returns:
        Path to the SQLite database file.
        - SNAKE_DB_PATH if set
        - Railway (production): /data/neonsnake.db
        - Local (development): backend/neonsnake.db
    """
    explicit_path = os.getenv('SNAKE_DB_PATH')
    if explicit_path:
        parent = os.path.dirname(explicit_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return explicit_path

    # Check if running on Railway by looking for RAILWAY_ENVIRONMENT
    if os.getenv('RAILWAY_ENVIRONMENT'):
        # Production: use volume-mounted path
        db_path = '/data/neonsnake.db'
        os.makedirs('/data', exist_ok=True)
    else:
        backend_dir = Path(__file__).parent
        db_path = str(backend_dir / 'neonsnake.db')

    return db_path


def get_connection() -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    db_path = get_database_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database() -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    cursor = conn.cursor()

    try:
        # Ledger rows; position 0 is the best score
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS high_scores (
                position INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                score INTEGER NOT NULL CHECK(score >= 0),
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
        logger.debug(f"Database schema ready at {get_database_path()}")

    except Exception as e:
        conn.rollback()
        logger.error(f"Error initializing database: {e}")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    logging.basicConfig(level=logging.INFO)
    init_database()
    print(f"Database ready at: {get_database_path()}")
