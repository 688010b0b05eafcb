"""
DevWatch Change Notifier.

Renders change events and command results on the terminal.
Requires Python 3.11+.
"""

import sys

from rich.console import Console
from rich.text import Text

from snapshot.models import ChangeEvent, ChangeKind
from watcher.runner import CommandResult


HEADER = "DevTools · Watch"

KIND_STYLES: dict[ChangeKind, str] = {
    ChangeKind.ADDED: "green",
    ChangeKind.MODIFIED: "yellow",
    ChangeKind.REMOVED: "red",
}


def format_change(event: ChangeEvent) -> Text:
    """Build the status line for one change event."""
    return Text.assemble(
        (f"[{event.kind.name}]", KIND_STYLES[event.kind]),
        f" {event.path} @ {event.file.timestamp()}",
    )


class ChangeNotifier:
    """
    Console presenter for the watch loop.

    Stateless apart from the console it writes to. Colors are always
    emitted; the screen is only cleared when the console is interactive.
    """

    def __init__(self, console: Console | None = None, clear_screen: bool = True) -> None:
        """
        Initialize the notifier.

        Args:
            console: Rich console (creates new if not provided)
            clear_screen: Whether to clear the terminal before each report
        """
        self.console = console or Console(
            highlight=False,
            force_terminal=True,
            force_interactive=sys.stdout.isatty(),
        )
        self._clear_screen = clear_screen

    def _clear(self) -> None:
        if self._clear_screen and self.console.is_interactive:
            self.console.clear()

    def _header(self) -> None:
        self.console.print(Text(HEADER, style="bold"))

    def show_startup(self) -> None:
        """Show the notice printed when the first snapshot is taken."""
        self._clear()
        self._header()

    def show_change(self, event: ChangeEvent) -> None:
        """Clear the screen and show one change line under the header."""
        self._clear()
        self._header()
        self.console.print()
        self.console.print(format_change(event), soft_wrap=True)

    def show_result(self, result: CommandResult) -> None:
        """Show the elapsed time and captured output of a command run."""
        self.console.print()
        self.console.print(Text(f"[Debug] {result.duration_ms:.2f}ms"))
        self.console.print()
        if result.output:
            self.console.print(Text.from_ansi(result.output), soft_wrap=True)
