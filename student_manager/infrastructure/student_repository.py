"""
SQLite-backed repository for student records.

`StudentRepository` owns a single connection for its whole lifetime, creates the
`students` table on construction, and exposes the four record operations:
`create`, `list_all`, `delete` and `count`. Each operation runs in its own
transaction; storage failures surface as `StoreAccessError` and are never
retried or swallowed.

Usage:
    with StudentRepository("students.db") as repo:
        student_id = repo.create(Student(first_name="Ann", last_name="Lee", age=20, code="S1"))
        for student in repo.list_all():
            print(student.id, student.full_name)
"""

from __future__ import annotations

import sqlite3
from contextlib import ExitStack, contextmanager
from pathlib import Path
from types import TracebackType
from typing import Generator, List, Optional, Type, Union

from student_manager.domain.models import Student
from student_manager.exceptions import StoreAccessError, StoreInitializationError
from student_manager.infrastructure.db_factory import resolve_db_path, sqlite_connection
from student_manager.utils.logging import get_logger

# AUTOINCREMENT keeps ids from being reused after the highest row is deleted.
SCHEMA = """
CREATE TABLE IF NOT EXISTS students (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    age INTEGER NOT NULL,
    code TEXT NOT NULL
)
"""

# Range of a SQLite INTEGER; ids outside it cannot exist in the table.
SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1

log = get_logger(__name__)


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the `students` table if it does not exist yet (idempotent)."""
    try:
        with conn:
            conn.execute(SCHEMA)
    except sqlite3.Error as exc:
        raise StoreInitializationError(f"Cannot initialize student schema: {exc}") from exc


class StudentRepository:
    """
    Persistence gateway for `Student` records.

    Not safe for concurrent callers: share an instance across threads only with
    external serialization around every call.
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None) -> None:
        self.db_path = resolve_db_path(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._resources = ExitStack()

        with ExitStack() as stack:
            conn = stack.enter_context(sqlite_connection(self.db_path))
            ensure_schema(conn)
            self._conn = conn
            self._resources = stack.pop_all()

        log.debug("Student repository ready", extra={"db_path": self.db_path})

    @property
    def closed(self) -> bool:
        return self._conn is None

    @contextmanager
    def _transaction(self, operation: str) -> Generator[sqlite3.Connection, None, None]:
        if self._conn is None:
            raise StoreAccessError(f"Cannot {operation}: repository is closed")
        try:
            with self._conn:
                yield self._conn
        except (sqlite3.Error, OverflowError) as exc:
            log.debug(
                "Store operation failed",
                extra={"operation": operation, "db_path": self.db_path, "error": str(exc)},
            )
            raise StoreAccessError(f"Failed to {operation}: {exc}") from exc

    def create(self, student: Student) -> int:
        """
        Insert `student` and return the identifier assigned by the store.

        Any `id` already set on `student` is ignored.
        """
        with self._transaction("create student") as conn:
            cursor = conn.execute(
                "INSERT INTO students (first_name, last_name, age, code) VALUES (?, ?, ?, ?)",
                (student.first_name, student.last_name, student.age, student.code),
            )
            student_id = int(cursor.lastrowid)
        log.debug("Created student", extra={"student_id": student_id})
        return student_id

    def list_all(self) -> List[Student]:
        """Return every stored student ordered by ascending id."""
        with self._transaction("list students") as conn:
            rows = conn.execute(
                "SELECT id, first_name, last_name, age, code FROM students ORDER BY id"
            ).fetchall()
        log.debug("Listed students", extra={"rows": len(rows)})
        return [Student.model_validate(dict(row)) for row in rows]

    def delete(self, student_id: int) -> bool:
        """Delete the student with `student_id`; False when no such row exists."""
        with self._transaction("delete student") as conn:
            if SQLITE_MIN_INT <= student_id <= SQLITE_MAX_INT:
                cursor = conn.execute("DELETE FROM students WHERE id = ?", (student_id,))
                deleted = cursor.rowcount > 0
            else:
                deleted = False
        log.debug("Delete student", extra={"student_id": student_id, "deleted": deleted})
        return deleted

    def count(self) -> int:
        with self._transaction("count students") as conn:
            (total,) = conn.execute("SELECT COUNT(*) FROM students").fetchone()
        return int(total)

    def close(self) -> None:
        """Release the connection. Calling it again is a no-op."""
        if self._conn is None:
            return
        self._conn = None
        self._resources.close()

    def __enter__(self) -> "StudentRepository":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


__all__ = ["SCHEMA", "StudentRepository", "ensure_schema"]
