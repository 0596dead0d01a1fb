"""
Domain package for the Student Manager.

Exports the student record and the input validation helpers used by the menu
and CLI layers. Keep this package focused on data definitions and validation.
"""

from student_manager.domain.models import Student
from student_manager.domain.validation import parse_student_id, validate_student_input

__all__ = [
    "Student",
    "parse_student_id",
    "validate_student_input",
]
