"""
Infrastructure package for the Student Manager.

Centralizes database connectivity concerns (path resolution, connection
factory) and the SQLite student repository. Keep this layer focused on I/O and
resource management, decoupled from the menu and CLI logic.
"""

from student_manager.infrastructure.db_factory import (
    connect,
    resolve_db_path,
    sqlite_connection,
)
from student_manager.infrastructure.student_repository import StudentRepository

__all__ = [
    "StudentRepository",
    "connect",
    "resolve_db_path",
    "sqlite_connection",
]
