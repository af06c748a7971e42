"""Console reporter: scan matches → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from callmatch.domain.model.call_match import CallMatch


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_bindings: Show parameter → argument column.
        max_matches: Max matches to display. None = unlimited.
        width: Console width in characters.
    """

    show_bindings: bool = True
    max_matches: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_matches is not None and self.max_matches < 0:
            raise ValueError(f"max_matches must be >= 0, got {self.max_matches}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, matches: Sequence[CallMatch]) -> str:
        """Format matches as rich formatted string.

        Args:
            matches: Scan results.

        Returns:
            Formatted string with a header and a table of matches.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        shown = self._limit(matches)

        console.print()
        console.rule("[bold]CALL MATCHES[/bold]")
        console.print()
        console.print(f"[bold]Matches:[/bold] {len(matches)}", highlight=False)

        if shown:
            console.print()
            console.print(self._build_table(shown))

        hidden = len(matches) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more[/dim]", highlight=False)

        return output.getvalue()

    def _limit(self, matches: Sequence[CallMatch]) -> Sequence[CallMatch]:
        if self._config.max_matches is None:
            return matches
        return matches[: self._config.max_matches]

    def _build_table(self, matches: Sequence[CallMatch]) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Location", style="cyan")
        table.add_column("Signature", style="yellow")
        if self._config.show_bindings:
            table.add_column("Arguments")

        for match in matches:
            row = [str(match.location), escape(match.signature)]
            if self._config.show_bindings:
                row.append(escape(format_bindings(match)))
            table.add_row(*row)

        return table


def format_bindings(match: CallMatch) -> str:
    """Format bindings as "a=1, [b]=2"; optional parameters in brackets."""
    parts: list[str] = []
    for binding in match.bindings:
        name = binding.parameter.name
        if binding.parameter.is_optional:
            name = f"[{name}]"
        parts.append(f"{name}={binding.source}")
    return ", ".join(parts)
