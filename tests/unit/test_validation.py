from __future__ import annotations

import pytest

from student_manager.config import Settings
from student_manager.domain.validation import parse_student_id, validate_student_input
from student_manager.exceptions import StudentValidationError

MIN_AGE = 15
MAX_AGE = 60


def test_valid_input_builds_unsaved_student(test_settings: Settings):
    student = validate_student_input("Ann", "Lee", "20", "S1", settings=test_settings)

    assert student.id is None
    assert (student.first_name, student.last_name, student.age, student.code) == ("Ann", "Lee", 20, "S1")


def test_whitespace_is_stripped(test_settings: Settings):
    student = validate_student_input("  Ann ", "\tLee", " 21 ", " S1 ", settings=test_settings)

    assert student.full_name == "Ann Lee"
    assert student.age == 21
    assert student.code == "S1"


def test_integer_age_is_accepted(test_settings: Settings):
    assert validate_student_input("Ann", "Lee", 30, "S1", settings=test_settings).age == 30


@pytest.mark.parametrize("age", [MIN_AGE, MAX_AGE])
def test_age_bounds_are_inclusive(test_settings: Settings, age: int):
    assert validate_student_input("Ann", "Lee", str(age), "S1", settings=test_settings).age == age


@pytest.mark.parametrize("age", [MIN_AGE - 1, MAX_AGE + 1, 0, -5])
def test_age_outside_range_is_rejected(test_settings: Settings, age: int):
    with pytest.raises(StudentValidationError) as excinfo:
        validate_student_input("Ann", "Lee", str(age), "S1", settings=test_settings)

    assert excinfo.value.errors == ["Age must be between 15 and 60."]


@pytest.mark.parametrize("age", ["abc", "", "twenty"])
def test_non_numeric_age_is_rejected(test_settings: Settings, age: str):
    with pytest.raises(StudentValidationError) as excinfo:
        validate_student_input("Ann", "Lee", age, "S1", settings=test_settings)

    assert excinfo.value.errors == ["Age must be a whole number."]


def test_all_problems_are_reported_in_field_order(test_settings: Settings):
    with pytest.raises(StudentValidationError) as excinfo:
        validate_student_input("", "   ", "abc", None, settings=test_settings)

    assert excinfo.value.errors == [
        "First name is required.",
        "Last name is required.",
        "Age must be a whole number.",
        "Student code is required.",
    ]
    assert "First name is required." in str(excinfo.value)


def test_custom_age_policy_from_settings(db_path: str):
    settings = Settings(db_path=db_path, min_age=18, max_age=25)

    assert validate_student_input("Ann", "Lee", "25", "S1", settings=settings).age == 25
    with pytest.raises(StudentValidationError) as excinfo:
        validate_student_input("Ann", "Lee", "17", "S1", settings=settings)
    assert excinfo.value.errors == ["Age must be between 18 and 25."]


def test_defaults_to_cached_settings():
    with pytest.raises(StudentValidationError):
        validate_student_input("Ann", "Lee", "61", "S1")


def test_validation_error_is_a_value_error():
    assert issubclass(StudentValidationError, ValueError)


@pytest.mark.parametrize("text, expected", [("1", 1), (" 42 ", 42), (7, 7)])
def test_parse_student_id(text, expected):
    assert parse_student_id(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "0", "-3", "1.5", None])
def test_parse_student_id_rejects_invalid(text):
    with pytest.raises(StudentValidationError) as excinfo:
        parse_student_id(text)

    assert excinfo.value.errors == ["Student ID must be a positive whole number."]
