"""
Shared SQLite connection handling for repositories.
"""

from contextlib import contextmanager
from typing import Generator, Any

import database


class BaseRepository:
    """
    Parent of the SQLite repositories.

    Every statement runs inside connection(), which opens a fresh connection
    to the file chosen by database.get_database_path().
    """

    @contextmanager
    def connection(self, commit: bool = True) -> Generator[Any, None, None]:
        """
        Yield (conn, cursor) for one unit of work.

        On a clean exit the transaction is committed when commit is True.
        Any exception rolls it back and is re-raised. The connection is
        closed either way.

            with self.connection(commit=False) as (conn, cursor):
                cursor.execute("SELECT name, score FROM high_scores")
        """
        conn = database.get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()
