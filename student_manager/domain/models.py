"""
Domain models for the Student Manager.

Defines the student record aligned with the `students` table created by
`StudentRepository`. Validation of user input lives in `domain.validation`;
this model only describes the shape of a stored row.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Student(BaseModel):
    """
    Representation of a single row in the `students` table.
    """

    id: Optional[int] = Field(None, description="Primary key (INTEGER AUTOINCREMENT).")
    first_name: str = Field(..., description="Given name.")
    last_name: str = Field(..., description="Family name.")
    age: int = Field(..., description="Age in years.")
    code: str = Field(..., description="Free-text student code.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


__all__ = ["Student"]
