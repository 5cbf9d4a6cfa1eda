"""CLI entry point for tally."""

import typer

from tally.commands.menu import menu_command

app = typer.Typer(
    name="tally",
    help="Tally - an interactive single-account ledger",
    add_completion=False,
)


@app.command()
def main() -> None:
    """Start the interactive account menu."""
    menu_command()


if __name__ == "__main__":
    app()
