"""
Database connection factory utilities for the Student Manager.

Resolves the SQLite database location from settings and opens connections with
a consistent configuration (row factory, failure translation). The
`sqlite_connection` context manager guarantees the handle is closed on every
exit path, including failures while the caller is still setting up.
"""

from __future__ import annotations

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Union

from student_manager.config import get_settings
from student_manager.exceptions import StoreInitializationError
from student_manager.utils.logging import get_logger

MEMORY_DB = ":memory:"

log = get_logger(__name__)


def resolve_db_path(override: Optional[Union[str, Path]] = None) -> str:
    """
    Return the database path to use, creating its parent directory if needed.

    Parameters
    ----------
    override : str or Path, optional
        Explicit path; falls back to `Settings.db_path` when omitted.
    """
    path = str(override) if override is not None else get_settings().db_path
    if path != MEMORY_DB:
        parent = os.path.dirname(os.path.abspath(path))
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as exc:
            raise StoreInitializationError(f"Cannot create directory for database {path!r}: {exc}") from exc
    return path


def connect(db_path: str) -> sqlite3.Connection:
    """
    Open a SQLite connection to `db_path`.

    Raises
    ------
    StoreInitializationError
        If the database file cannot be opened.
    """
    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as exc:
        raise StoreInitializationError(f"Cannot open database {db_path!r}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    log.debug("Opened database connection", extra={"db_path": db_path})
    return conn


@contextmanager
def sqlite_connection(db_path: str) -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager yielding a connection that is always closed on exit.

    Example
    -------
        with sqlite_connection("students.db") as conn:
            conn.execute("SELECT 1")
    """
    conn = connect(db_path)
    try:
        yield conn
    finally:
        conn.close()
        log.debug("Closed database connection", extra={"db_path": db_path})


__all__ = [
    "MEMORY_DB",
    "connect",
    "resolve_db_path",
    "sqlite_connection",
]
