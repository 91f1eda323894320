"""Database connection handling for the event store."""

from __future__ import annotations

import sqlite3
from pathlib import Path

DEFAULT_DATABASE = "source_projet2A.db"


class DatabaseConnectionError(Exception):
    """Raised when the database cannot be opened or is used while closed."""


class Connection:
    """An SQLite database connection that can be opened, closed and used as a context manager."""

    def __init__(self, path: str | Path = DEFAULT_DATABASE) -> None:
        self.path = str(path)
        self._db: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._db is not None

    @property
    def database(self) -> sqlite3.Connection:
        """The underlying sqlite3 connection; raises if the connection is closed."""
        if self._db is None:
            raise DatabaseConnectionError("the database connection is not open")
        return self._db

    def open(self) -> sqlite3.Connection:
        """Open the database, raising DatabaseConnectionError on failure."""
        if self._db is not None:
            return self._db
        try:
            db = sqlite3.connect(self.path)
            db.execute("SELECT 1")
        except sqlite3.Error as exc:
            raise DatabaseConnectionError(
                f"La connexion à la base de données a échoué.\n{exc}"
            ) from exc
        db.row_factory = sqlite3.Row
        self._db = db
        return db

    def close(self) -> None:
        """Close the database if it is open."""
        if self._db is not None:
            self._db.close()
            self._db = None

    def __enter__(self) -> Connection:
        self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()