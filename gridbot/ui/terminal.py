"""
Main terminal interface for gridbot.

Handles:
- Prompt and line input
- Robot status, arrival and mission messages
- Grid rendering
- Summary and configuration tables
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridbot.ui.themes import get_theme


class Terminal:
    """
    Rich terminal interface for gridbot.

    Usage:
    ```python
    term = Terminal(theme="classic")
    term.print_welcome(hint)
    term.print_status(0, 0, "North")
    line = term.get_input()
    ```
    """

    def __init__(self, theme: str = "classic", console: Optional[Console] = None):
        self.console = console or Console()
        self.theme = get_theme(theme)

    def print(self, message: str = "", style: Optional[str] = None):
        """Print a plain message."""
        self.console.print(escape(message), style=style or self.theme.secondary, soft_wrap=True)

    def print_welcome(self, commands_hint: str):
        """Show the welcome banner and command list."""
        self.console.print(
            f"[{self.theme.primary}]Welcome to the gridbot robot simulator![/]"
        )
        self.console.print(f"[{self.theme.dim}]Commands: {escape(commands_hint)}[/]", soft_wrap=True)

    def print_status(self, x: int, y: int, facing: str):
        """Show the robot position and facing."""
        self.console.print(
            f"Robot is at ({x}, {y}) facing {facing}",
            style=self.theme.secondary,
            highlight=False,
            soft_wrap=True,
        )

    def print_grid(self, rows: list[str], marker: str):
        """Show the grid, top row first, with the robot marker highlighted."""
        self.console.print()
        self.console.print("Current Grid:", style=self.theme.primary)
        for row in rows:
            text = Text(row, style=self.theme.dim)
            text.highlight_words([marker], style=self.theme.accent)
            self.console.print(text)
        self.console.print()

    def print_arrival(self, x: int, y: int):
        """Show the end of a navigation."""
        self.console.print(
            f"[{self.theme.primary}]{self.theme.arrival_symbol} Arrived at ({x}, {y})![/]",
            highlight=False,
            soft_wrap=True,
        )

    def print_error(self, message: str):
        """Show an error."""
        self.console.print(
            f"[{self.theme.error}]{self.theme.error_symbol} {escape(message)}[/]",
            soft_wrap=True,
        )

    def print_success(self, message: str):
        """Show a success message."""
        self.console.print(
            f"[{self.theme.success}]{self.theme.success_symbol} {escape(message)}[/]",
            soft_wrap=True,
        )

    def print_warning(self, message: str):
        """Show a warning."""
        self.console.print(
            f"[{self.theme.warning}]{self.theme.warning_symbol} {escape(message)}[/]",
            soft_wrap=True,
        )

    def print_summary(self, snapshot: dict):
        """Show a robot snapshot as a table."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style=self.theme.accent)
        table.add_column(style=self.theme.secondary)

        table.add_row("Position", f"({snapshot['x']}, {snapshot['y']})")
        table.add_row("Facing", snapshot["facing"])

        mission = snapshot.get("mission")
        if mission is None:
            table.add_row("Mission", "none")
        else:
            state = "completed" if mission["completed"] else "pending"
            table.add_row(
                "Mission",
                Text(
                    f"{mission['description']} at "
                    f"({mission['target_x']}, {mission['target_y']}) [{state}]"
                ),
            )

        self.console.print(Panel(table, title="Robot", border_style=self.theme.dim))

    def print_config(self, rows: list[tuple[str, str]], title: str = "gridbot Configuration"):
        """Show configuration key/value pairs."""
        table = Table(title=title, show_header=True, header_style=self.theme.primary)
        table.add_column("Setting", style=self.theme.accent)
        table.add_column("Value", style=self.theme.secondary)
        for key, value in rows:
            table.add_row(key, escape(value))
        self.console.print(table)

    def get_input(self) -> str:
        """Read one line after showing the prompt."""
        return self.console.input(f"[{self.theme.primary}]>[/] ")
