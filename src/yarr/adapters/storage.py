"""SQLite storage opener."""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)


class SqliteStorage:
    """Thin owner of the yarr SQLite connection."""

    def __init__(self, path: str, connection: sqlite3.Connection) -> None:
        self.path = path
        self.connection = connection

    @classmethod
    def open(cls, path: str) -> "SqliteStorage":
        """Open (creating if needed) the database at ``path``.

        The file is probed with a read so a non-database file fails here
        rather than on first use.

        Raises:
            sqlite3.Error: If the file cannot be opened as a SQLite database.
        """
        conn = sqlite3.connect(path, check_same_thread=False)
        try:
            conn.execute("PRAGMA busy_timeout = 5000")
            version = conn.execute("PRAGMA user_version").fetchone()[0]
        except sqlite3.Error:
            conn.close()
            raise
        logger.debug("opened %s (schema version %s)", path, version)
        return cls(path, conn)

    def close(self) -> None:
        self.connection.close()


__all__ = ["SqliteStorage"]
