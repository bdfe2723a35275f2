"""Console reporter: EnumDefinition -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from enumkit.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from enumkit.domain.model.case import Case
    from enumkit.domain.model.definition import EnumDefinition


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_raw_values: Add a raw value column to the case table.
        show_summary: Print kind, state and naming rule above the table.
        max_cases: Max cases to display. None = unlimited.
        width: Console width in characters.
    """

    show_raw_values: bool = True
    show_summary: bool = True
    max_cases: int | None = None
    width: int = 100

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_cases is not None and self.max_cases < 0:
            raise ValueError(f"max_cases must be >= 0, got {self.max_cases}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text."""

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, definition: EnumDefinition) -> str:
        """Format definition as rich formatted string.

        Args:
            definition: Definition to describe

        Returns:
            Formatted string with colors and a case table
        """
        output = StringIO()
        console = Console(
            file=output, force_terminal=True, width=self._config.width, highlight=False
        )

        console.rule(f"[bold]{definition.name}[/bold]")
        if self._config.show_summary:
            self._render_summary(console, definition)

        cases = definition.cases
        if self._config.max_cases is not None:
            cases = cases[: self._config.max_cases]
        console.print(self._build_table(cases))

        hidden = len(definition) - len(cases)
        if hidden:
            console.print(f"[dim]... {hidden} more case(s)[/dim]")

        return output.getvalue()

    def _render_summary(self, console: Console, definition: EnumDefinition) -> None:
        """Render kind, state and naming rule."""
        state = "[red]frozen[/red]" if definition.is_frozen else "[green]open[/green]"
        parts = [
            f"[bold]Cases:[/bold] {len(definition)}",
            f"[bold]Kind:[/bold] {definition.kind.name}",
            f"[bold]State:[/bold] {state}",
        ]
        if definition.naming is not None:
            parts.append(f"[bold]Naming:[/bold] {definition.naming}")
        console.print("  ".join(parts))

    def _build_table(self, cases: tuple[Case, ...]) -> Table:
        """Build case table in registration order."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Case", style="yellow")
        if self._config.show_raw_values:
            table.add_column("Raw value")

        for index, case in enumerate(cases):
            row = [str(index), case.name]
            if self._config.show_raw_values:
                row.append(repr(case.raw_value))
            table.add_row(*row)
        return table
