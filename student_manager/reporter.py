from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from student_manager.domain.models import Student


def print_students(students: Sequence[Student], console: Optional[Console] = None) -> None:
    """
    Render students as a rich table, in the order given.

    User-entered text is escaped so names containing `[` are not read as markup.
    """
    console = console or Console()

    if not students:
        console.print("[yellow]No students found.[/yellow]")
        return

    table = Table(box=box.ROUNDED, caption=f"{len(students)} student(s)")
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Age", justify="right", style="green")
    table.add_column("Student Code", style="yellow")

    for student in students:
        table.add_row(
            str(student.id),
            escape(student.full_name),
            str(student.age),
            escape(student.code),
        )

    console.print(table)


def print_count(count: int, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(f"Total students: {count}")


__all__ = ["print_count", "print_students"]
