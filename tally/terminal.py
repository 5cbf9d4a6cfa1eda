"""Line-based terminal I/O used by the menu and account operations."""

import typer
from rich.console import Console

from tally.errors import InputClosedError

console = Console()


class Terminal:
    """Prompts for and prints single lines of text."""

    def __init__(self, output: Console | None = None) -> None:
        self.console = output or console
        self.closed = False

    def prompt_line(self, prompt_text: str) -> str:
        """Show a prompt and block until the user enters a line.

        Args:
            prompt_text: Prompt without the trailing ": ", which typer adds.

        Returns:
            The entered line without its terminator. Empty input is returned as "".

        Raises:
            InputClosedError: If the terminal is closed or input has ended.
        """
        if self.closed:
            raise InputClosedError("Terminal is closed")

        try:
            line: str = typer.prompt(prompt_text, type=str, default="", show_default=False)
        except (typer.Abort, EOFError) as e:
            raise InputClosedError("Input stream closed while waiting for input") from e
        return line

    def print_line(self, text: str) -> None:
        """Print a line of text exactly as given."""
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def close(self) -> None:
        """Stop accepting input."""
        self.closed = True
