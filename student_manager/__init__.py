"""
Student Manager - console application for managing student records.

This package provides a small SQLite-backed record store and the console layers
around it:

- A `Student` record model and caller-side input validation
- A `StudentRepository` with create, list, delete and count operations
- An interactive, state-machine driven menu
- A typer CLI exposing each operation as a command

Configuration comes from environment variables (see `Settings`), and logging is
centralized in `student_manager.utils.logging`.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from student_manager.config import Settings, get_settings
from student_manager.domain import Student, parse_student_id, validate_student_input
from student_manager.exceptions import (
    RepositoryError,
    StoreAccessError,
    StoreInitializationError,
    StudentValidationError,
)
from student_manager.infrastructure import StudentRepository
from student_manager.menu import MenuState, StudentMenu
from student_manager.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Student",
    "parse_student_id",
    "validate_student_input",
    # Persistence
    "StudentRepository",
    # Errors
    "RepositoryError",
    "StoreAccessError",
    "StoreInitializationError",
    "StudentValidationError",
    # Console
    "MenuState",
    "StudentMenu",
    # Logging
    "configure_logging",
    "get_logger",
]
