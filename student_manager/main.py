from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from student_manager.config import get_settings
from student_manager.domain.validation import validate_student_input
from student_manager.exceptions import RepositoryError, StudentValidationError
from student_manager.infrastructure.student_repository import StudentRepository
from student_manager.menu import StudentMenu
from student_manager.reporter import print_count, print_students
from student_manager.utils.logging import configure_logging

app = typer.Typer(help="Student Manager CLI.")


def _open_repository(ctx: typer.Context) -> StudentRepository:
    db_path: Optional[Path] = (ctx.obj or {}).get("db_path")
    try:
        return StudentRepository(db_path)
    except RepositoryError as exc:
        typer.echo(f"Cannot open student database: {exc.message}", err=True)
        raise typer.Exit(code=1)


def _fail(exc: Exception) -> NoReturn:
    if isinstance(exc, StudentValidationError):
        for error in exc.errors:
            typer.echo(error, err=True)
    else:
        typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    db_path: Optional[Path] = typer.Option(
        None,
        "--db",
        help="Path to the SQLite database file (default from settings).",
    ),
) -> None:
    """
    Manage student records. Runs the interactive menu when no command is given.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    ctx.obj = {"db_path": db_path}
    if ctx.invoked_subcommand is None:
        menu(ctx)


@app.command()
def info(ctx: typer.Context) -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    db_path = (ctx.obj or {}).get("db_path") or settings.db_path
    typer.echo(
        f"DB={db_path} | env={settings.app_env} | log_level={settings.log_level} | "
        f"age_range={settings.min_age}-{settings.max_age}"
    )


@app.command()
def menu(ctx: typer.Context) -> None:
    """
    Run the interactive student menu.
    """
    with _open_repository(ctx) as repository:
        StudentMenu(repository, settings=get_settings()).run()


@app.command()
def add(
    ctx: typer.Context,
    first_name: str = typer.Option(..., "--first-name", "-f", help="Given name."),
    last_name: str = typer.Option(..., "--last-name", "-l", help="Family name."),
    age: str = typer.Option(..., "--age", "-a", help="Age in years."),
    code: str = typer.Option(..., "--code", "-c", help="Student code."),
) -> None:
    """
    Add a student and print the assigned ID.
    """
    try:
        student = validate_student_input(first_name, last_name, age, code)
    except StudentValidationError as exc:
        _fail(exc)
    with _open_repository(ctx) as repository:
        try:
            student_id = repository.create(student)
        except RepositoryError as exc:
            _fail(exc)
    typer.echo(f"Student added successfully! (ID: {student_id})")


@app.command(name="list")
def list_students(ctx: typer.Context) -> None:
    """
    List all students ordered by ID.
    """
    with _open_repository(ctx) as repository:
        try:
            students = repository.list_all()
        except RepositoryError as exc:
            _fail(exc)
    print_students(students, console=Console())


@app.command()
def delete(
    ctx: typer.Context,
    student_id: int = typer.Argument(..., min=1, help="ID of the student to delete."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """
    Delete a student by ID.
    """
    if not yes and not typer.confirm(f"Delete student {student_id}?", default=False):
        typer.echo("Deletion cancelled.")
        raise typer.Exit()
    with _open_repository(ctx) as repository:
        try:
            deleted = repository.delete(student_id)
        except RepositoryError as exc:
            _fail(exc)
    if not deleted:
        typer.echo("Student not found!", err=True)
        raise typer.Exit(code=1)
    typer.echo("Student deleted successfully!")


@app.command()
def count(ctx: typer.Context) -> None:
    """
    Print the total number of students.
    """
    with _open_repository(ctx) as repository:
        try:
            total = repository.count()
        except RepositoryError as exc:
            _fail(exc)
    print_count(total, console=Console())


def main() -> None:
    try:
        app()
    except (KeyboardInterrupt, EOFError):
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
