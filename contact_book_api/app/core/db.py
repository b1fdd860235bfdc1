"""
SQLite database integration.

This module provides the ``Database`` handle that owns the single
long‑lived SQLite connection used by the service.  The handle is
created by ``create_app``, opened on application startup and closed on
shutdown.  Route handlers receive it through the ``get_database``
dependency rather than importing a module global.

All access goes through ``Database.cursor()``, which serialises use of
the shared connection, commits on success, rolls back on failure and
converts ``sqlite3`` errors into ``StorageError``.

The schema is a single ``contacts`` table created if absent.
``AUTOINCREMENT`` guarantees that ids are never reused after a
deletion.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request

from .exceptions import StorageError


logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS contacts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    phone TEXT NOT NULL
);
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned as is; relative paths
    are resolved against the current working directory.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    return os.path.abspath(database_url)


class Database:
    """Shared SQLite connection with an explicit open/close lifecycle."""

    def __init__(self, database_url: str) -> None:
        self.path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> bool:
        """Open the connection and create the schema.

        Failures are logged and reported through the return value; the
        service keeps running and every later operation fails with
        ``StorageError``.
        """
        try:
            # Handlers run storage calls in worker threads, so the
            # connection must be usable from any thread.  ``_lock``
            # serialises the actual access.
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.executescript(SCHEMA)
        except sqlite3.Error as exc:
            logger.error("Database connection error: %s", exc)
            return False
        self._conn = conn
        logger.info("Connected to SQLite database at %s", self.path)
        return True

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Database connection closed")

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor on the shared connection.

        The lock is held for the whole block.  The transaction is
        committed when the block exits normally and rolled back
        otherwise.
        """
        with self._lock:
            if self._conn is None:
                raise StorageError("Database is not connected")
            conn = self._conn
            cursor = conn.cursor()
            try:
                yield cursor
                conn.commit()
            except sqlite3.Error as exc:
                conn.rollback()
                logger.error("Storage failure: %s", exc)
                raise StorageError(str(exc)) from exc
            except BaseException:
                conn.rollback()
                raise
            finally:
                cursor.close()

    def ping(self) -> None:
        """Run a trivial query; raises ``StorageError`` on failure."""
        with self.cursor() as cursor:
            cursor.execute("SELECT 1 FROM contacts LIMIT 1")


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the application's database handle."""
    return request.app.state.db
