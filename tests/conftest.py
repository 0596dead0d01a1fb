"""
Pytest configuration for the Student Manager.

Provides fixtures for:
- Settings isolation (no developer environment or .env leaking into tests)
- A temporary SQLite database path
- An open repository that is closed after each test
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generator

import pytest

from student_manager.config import Settings, get_settings
from student_manager.domain.models import Student
from student_manager.infrastructure.student_repository import StudentRepository

_SETTINGS_ENV_VARS = (
    "STUDENTS_DB_PATH",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "STUDENT_MIN_AGE",
    "STUDENT_MAX_AGE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Run every test from an empty directory with a clean settings cache.

    Keeps a stray `.env` or `students.db` in the working tree out of the tests,
    and restores root logging handlers replaced by the CLI callback.
    """
    for var in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    get_settings.cache_clear()


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "data" / "students_test.db")


@pytest.fixture()
def test_settings(db_path: str) -> Settings:
    """Settings with test-specific overrides and the default age policy."""
    return Settings(db_path=db_path, log_level="DEBUG", min_age=15, max_age=60)


@pytest.fixture()
def repository(db_path: str) -> Generator[StudentRepository, None, None]:
    repo = StudentRepository(db_path)
    try:
        yield repo
    finally:
        repo.close()


@pytest.fixture()
def make_student() -> Callable[..., Student]:
    def _make(first_name: str = "Ann", last_name: str = "Lee", age: int = 20, code: str = "S1") -> Student:
        return Student(first_name=first_name, last_name=last_name, age=age, code=code)

    return _make
