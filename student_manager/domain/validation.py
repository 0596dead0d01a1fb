"""
Input validation for data typed in at the console or passed on the command line.

The repository stores whatever it is given; required-field and age-range checks
happen here, before a `Student` is handed over for persistence.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from student_manager.config import Settings, get_settings
from student_manager.domain.models import Student
from student_manager.exceptions import StudentValidationError

_FIELD_MESSAGES: Dict[str, str] = {
    "first_name": "First name is required.",
    "last_name": "Last name is required.",
    "age": "Age must be a whole number.",
    "code": "Student code is required.",
}


class StudentInput(BaseModel):
    """Raw student fields as entered by a user."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    age: int
    code: str = Field(..., min_length=1)

    @field_validator("age")
    @classmethod
    def _age_in_range(cls, value: int, info: ValidationInfo) -> int:
        bounds = info.context or {}
        min_age = bounds.get("min_age")
        max_age = bounds.get("max_age")
        if min_age is not None and max_age is not None and not min_age <= value <= max_age:
            raise PydanticCustomError(
                "age_range",
                "Age must be between {min_age} and {max_age}.",
                {"min_age": min_age, "max_age": max_age},
            )
        return value


def _messages(exc: ValidationError) -> List[str]:
    messages: List[str] = []
    for error in exc.errors():
        if error["type"] == "age_range":
            message = error["msg"]
        else:
            field = str(error["loc"][0]) if error["loc"] else ""
            message = _FIELD_MESSAGES.get(field, error["msg"])
        if message not in messages:
            messages.append(message)
    return messages


def validate_student_input(
    first_name: Optional[str],
    last_name: Optional[str],
    age: Union[int, str, None],
    code: Optional[str],
    settings: Optional[Settings] = None,
) -> Student:
    """
    Validate user-supplied fields and build an unsaved `Student`.

    Parameters
    ----------
    first_name, last_name, code : str
        Required text; surrounding whitespace is stripped.
    age : int or str
        Parsed as an integer and checked against the configured age range.
    settings : Settings, optional
        Source of `min_age`/`max_age`; defaults to the cached settings.

    Raises
    ------
    StudentValidationError
        Listing every problem found, in field order.
    """
    settings = settings or get_settings()
    if isinstance(age, str):
        age = age.strip()

    data: Dict[str, Any] = {
        "first_name": first_name,
        "last_name": last_name,
        "age": age,
        "code": code,
    }
    try:
        parsed = StudentInput.model_validate(
            data,
            context={"min_age": settings.min_age, "max_age": settings.max_age},
        )
    except ValidationError as exc:
        raise StudentValidationError(_messages(exc)) from exc

    return Student(
        first_name=parsed.first_name,
        last_name=parsed.last_name,
        age=parsed.age,
        code=parsed.code,
    )


def parse_student_id(text: Union[int, str, None]) -> int:
    """Parse a student identifier; it must be a positive integer."""
    message = "Student ID must be a positive whole number."
    if text is None:
        raise StudentValidationError([message])
    try:
        student_id = int(str(text).strip())
    except ValueError as exc:
        raise StudentValidationError([message]) from exc
    if student_id <= 0:
        raise StudentValidationError([message])
    return student_id


__all__ = ["StudentInput", "validate_student_input", "parse_student_id"]
