"""Console reporter: AnalysisOutcome → rich formatted string."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from luadump.domain.model.member_kind import MemberKind
from luadump.domain.model.outcome import NoShape, Shape, SyntaxErrorOutcome

if TYPE_CHECKING:
    from luadump.domain.model.module_shape import ModuleShape
    from luadump.domain.model.outcome import AnalysisOutcome

_KIND_STYLES = {
    MemberKind.VALUE: "cyan",
    MemberKind.FUNCTION: "green",
    MemberKind.METHOD: "magenta",
}


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, *, title: str | None = None, color: bool = True, width: int = 100) -> None:
        """Initialize reporter.

        Args:
            title: Heading shown above the report (usually the file name).
            color: Emit ANSI styles.
            width: Render width in columns.
        """
        self._title = title
        self._color = color
        self._width = width

    def report(self, outcome: AnalysisOutcome) -> str:
        """Format outcome as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._color,
            no_color=not self._color,
            width=self._width,
        )

        if self._title:
            console.rule(f"[bold]{escape(self._title)}[/bold]")

        match outcome:
            case Shape(shape=shape):
                self._render_shape(console, shape)
            case NoShape():
                console.print("[yellow]no statically determinable shape[/yellow]")
            case SyntaxErrorOutcome(position=position, message=message):
                console.print(f"[bold red]syntax error[/bold red] at {position}: {escape(message)}")

        return output.getvalue()

    def _render_shape(self, console: Console, shape: ModuleShape) -> None:
        """Render members table, or a note when the shape is empty."""
        if not shape:
            console.print("[dim]no members[/dim]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Member")
        table.add_column("Kind")

        for name, kind in shape.items():
            style = _KIND_STYLES[kind]
            table.add_row(escape(name), f"[{style}]{kind.value}[/{style}]")

        console.print(table)
        console.print(f"[bold]Members:[/bold] {len(shape)}")
