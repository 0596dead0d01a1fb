"""
Interactive console menu for the Student Manager.

The menu is an explicit state machine: each state handler performs one step and
returns the next state, and the loop ends on `MenuState.EXIT`. The only state
shared between steps is the repository passed in.

Usage:
    with StudentRepository() as repo:
        StudentMenu(repo).run()
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, TextIO, Tuple

from rich.console import Console
from rich.markup import escape

from student_manager.config import Settings, get_settings
from student_manager.domain.validation import parse_student_id, validate_student_input
from student_manager.exceptions import RepositoryError, StudentValidationError
from student_manager.infrastructure.student_repository import StudentRepository
from student_manager.reporter import print_count, print_students
from student_manager.utils.logging import get_logger

log = get_logger(__name__)


class MenuState(str, Enum):
    MENU = "menu"
    ADD = "add"
    VIEW = "view"
    DELETE = "delete"
    COUNT = "count"
    EXIT = "exit"


MENU_OPTIONS: Tuple[Tuple[str, str, MenuState], ...] = (
    ("1", "Add Student", MenuState.ADD),
    ("2", "View Students", MenuState.VIEW),
    ("3", "Delete Student", MenuState.DELETE),
    ("4", "Count Students", MenuState.COUNT),
    ("5", "Exit", MenuState.EXIT),
)


class StudentMenu:
    """
    Drive a `StudentRepository` from line-based console input.

    Parameters
    ----------
    repository : StudentRepository
        Open repository; the menu never closes it.
    settings : Settings, optional
        Supplies the age policy used when adding students.
    console : Console, optional
        Output target; defaults to a new rich Console on stdout.
    stream : TextIO, optional
        Input source; defaults to standard input.
    """

    def __init__(
        self,
        repository: StudentRepository,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.repository = repository
        self.settings = settings or get_settings()
        self.console = console or Console()
        self.stream = stream
        self._handlers: Dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MENU: self._choose,
            MenuState.ADD: self._add,
            MenuState.VIEW: self._view,
            MenuState.DELETE: self._delete,
            MenuState.COUNT: self._count,
        }

    def run(self) -> None:
        self.console.print("=== Student Management System ===")
        state = MenuState.MENU
        while state is not MenuState.EXIT:
            try:
                state = self.step(state)
            except EOFError:
                self.console.print()
                state = MenuState.EXIT
        self.console.print("Goodbye!")

    def step(self, state: MenuState) -> MenuState:
        """Run the handler for `state` and return the state to move to."""
        handler = self._handlers[state]
        if state is MenuState.MENU:
            return handler()
        try:
            return handler()
        except StudentValidationError as exc:
            for error in exc.errors:
                self.console.print(f"[red]{escape(error)}[/red]")
        except RepositoryError as exc:
            log.warning("Menu action failed", extra={"state": state.value, "error": exc.message})
            self.console.print(f"[red]Error:[/red] {escape(exc.message)}")
        return MenuState.MENU

    def _ask(self, label: str) -> str:
        if self.stream is None:
            return self.console.input(f"{label}: ")
        line = self.console.input(f"{label}: ", stream=self.stream)
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _choose(self) -> MenuState:
        self.console.print()
        for key, label, _ in MENU_OPTIONS:
            self.console.print(f"{key}. {label}")
        choice = self._ask("Choose option").strip()
        for key, _, state in MENU_OPTIONS:
            if choice == key:
                return state
        self.console.print("[red]Invalid choice![/red]")
        return MenuState.MENU

    def _add(self) -> MenuState:
        first_name = self._ask("First Name")
        last_name = self._ask("Last Name")
        age = self._ask("Age")
        code = self._ask("Student Code")
        student = validate_student_input(first_name, last_name, age, code, settings=self.settings)
        student_id = self.repository.create(student)
        self.console.print(f"[green]Student added successfully! (ID: {student_id})[/green]")
        return MenuState.MENU

    def _view(self) -> MenuState:
        print_students(self.repository.list_all(), console=self.console)
        return MenuState.MENU

    def _delete(self) -> MenuState:
        student_id = parse_student_id(self._ask("Enter student ID to delete"))
        answer = self._ask(f"Delete student {student_id}? (y/N)").strip().lower()
        if answer not in ("y", "yes"):
            self.console.print("Deletion cancelled.")
            return MenuState.MENU
        if self.repository.delete(student_id):
            self.console.print("[green]Student deleted successfully![/green]")
        else:
            self.console.print("[yellow]Student not found![/yellow]")
        return MenuState.MENU

    def _count(self) -> MenuState:
        print_count(self.repository.count(), console=self.console)
        return MenuState.MENU


__all__ = ["MENU_OPTIONS", "MenuState", "StudentMenu"]
