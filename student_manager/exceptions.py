"""Error taxonomy for the repository and the input layer."""

from __future__ import annotations

from typing import List, Optional


class RepositoryError(Exception):
    """Base for all store-related errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StoreInitializationError(RepositoryError):
    """Raised when the database cannot be opened or its schema cannot be created."""


class StoreAccessError(RepositoryError):
    """Raised when an operation cannot be carried out against the store."""


class StudentValidationError(ValueError):
    """Raised when user-supplied student data is rejected."""

    def __init__(self, errors: List[str], message: Optional[str] = None) -> None:
        self.errors = list(errors)
        super().__init__(message or "; ".join(self.errors))


__all__ = [
    "RepositoryError",
    "StoreInitializationError",
    "StoreAccessError",
    "StudentValidationError",
]
