"""Interactive menu loop for the account."""

import sys
from pathlib import Path

from rich.markup import escape

from tally.commands.operations import AccountOperations
from tally.config import get_ledger_config
from tally.domain.ledger import parse_menu_choice
from tally.domain.models import MenuChoice
from tally.errors import TallyError
from tally.logging import configure_logging, get_logger
from tally.store.ledger_store import LedgerStore
from tally.terminal import Terminal, console

logger = get_logger(__name__)

SEPARATOR = "-" * 32

MENU_LINES = [
    SEPARATOR,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    SEPARATOR,
]

INVALID_CHOICE = "Invalid choice, please select 1-4."
GOODBYE = "Exiting the program. Goodbye!"


class MenuLoop:
    """Show the menu and dispatch choices until the user exits."""

    def __init__(self, operations: AccountOperations, terminal: Terminal) -> None:
        self.operations = operations
        self.terminal = terminal
        self.running = True

    def display_menu(self) -> None:
        """Print the menu options."""
        for line in MENU_LINES:
            self.terminal.print_line(line)

    def process_choice(self, choice_text: str) -> None:
        """Dispatch one menu selection.

        Args:
            choice_text: Selection as typed by the user.
        """
        choice = parse_menu_choice(choice_text)

        if choice is MenuChoice.VIEW_BALANCE:
            self.operations.view_balance()
        elif choice is MenuChoice.CREDIT:
            self.operations.credit()
        elif choice is MenuChoice.DEBIT:
            self.operations.debit()
        elif choice is MenuChoice.EXIT:
            self.running = False
        else:
            logger.info("Rejected menu choice %r", choice_text)
            self.terminal.print_line(INVALID_CHOICE)

    def run(self) -> int:
        """Run the session until the user chooses Exit.

        Returns:
            Number of menu selections processed, including the final Exit.

        Raises:
            InputClosedError: If input ends before the user exits.
        """
        iterations = 0
        while self.running:
            self.display_menu()
            choice_text = self.terminal.prompt_line("Enter your choice (1-4)")
            self.process_choice(choice_text)
            iterations += 1

        self.terminal.print_line(GOODBYE)
        self.terminal.close()
        logger.debug("Session ended after %d selections", iterations)
        return iterations


def menu_command(config_path: Path | None = None) -> None:
    """Run an interactive account session."""
    configure_logging()
    try:
        ledger_config = get_ledger_config(config_path)
        configure_logging(fallback=ledger_config.log_level)

        terminal = Terminal()
        store = LedgerStore(ledger_config.initial_balance)
        MenuLoop(AccountOperations(store, terminal), terminal).run()

    except TallyError as e:
        logger.error("Session aborted: %s", e)
        console.print(f"[red]Error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
