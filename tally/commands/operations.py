"""Account operations: view, credit and debit the balance."""

from dataclasses import dataclass
from enum import StrEnum

from tally.domain.ledger import calculate_credit, calculate_debit, format_money, parse_amount
from tally.domain.models import Money
from tally.logging import get_logger
from tally.store.ledger_store import LedgerStore
from tally.terminal import Terminal

logger = get_logger(__name__)

INVALID_AMOUNT = "Invalid amount. Please enter a valid positive number."


class Outcome(StrEnum):
    """What an account operation did."""

    VIEWED = "viewed"
    CREDITED = "credited"
    DEBITED = "debited"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True)
class OperationResult:
    """Immutable result of an account operation."""

    outcome: Outcome
    balance: Money  # Balance after the operation


class AccountOperations:
    """Business actions against a single ledger store."""

    def __init__(self, store: LedgerStore, terminal: Terminal) -> None:
        self.store = store
        self.terminal = terminal

    def view_balance(self) -> OperationResult:
        """Print the current balance."""
        balance = self.store.read()
        self.terminal.print_line(f"Current balance: {format_money(balance)}")
        return OperationResult(Outcome.VIEWED, balance)

    def credit(self, amount_text: str | None = None) -> OperationResult:
        """Add an amount to the balance.

        Args:
            amount_text: Amount as typed by the user. If None, prompts for it.

        Returns:
            Result with the balance after the operation.
        """
        if amount_text is None:
            amount_text = self.terminal.prompt_line("Enter credit amount")

        amount = self._parse_amount(amount_text)
        if amount is None:
            return OperationResult(Outcome.INVALID_AMOUNT, self.store.read())

        new_balance = calculate_credit(self.store.read(), amount)
        self.store.write(new_balance)
        logger.debug("Credited %s, balance now %s", format_money(amount), format_money(new_balance))
        self.terminal.print_line(f"Amount credited. New balance: {format_money(new_balance)}")
        return OperationResult(Outcome.CREDITED, new_balance)

    def debit(self, amount_text: str | None = None) -> OperationResult:
        """Subtract an amount from the balance unless it would overdraw it.

        Args:
            amount_text: Amount as typed by the user. If None, prompts for it.

        Returns:
            Result with the balance after the operation.
        """
        if amount_text is None:
            amount_text = self.terminal.prompt_line("Enter debit amount")

        amount = self._parse_amount(amount_text)
        if amount is None:
            return OperationResult(Outcome.INVALID_AMOUNT, self.store.read())

        current_balance = self.store.read()
        new_balance, error = calculate_debit(current_balance, amount)
        if error:
            logger.info("Rejected debit of %s against %s", format_money(amount), format_money(current_balance))
            self.terminal.print_line(error)
            return OperationResult(Outcome.INSUFFICIENT_FUNDS, current_balance)

        self.store.write(new_balance)
        logger.debug("Debited %s, balance now %s", format_money(amount), format_money(new_balance))
        self.terminal.print_line(f"Amount debited. New balance: {format_money(new_balance)}")
        return OperationResult(Outcome.DEBITED, new_balance)

    def _parse_amount(self, amount_text: str) -> Money | None:
        amount = parse_amount(amount_text)
        if amount is None:
            logger.info("Rejected amount %r", amount_text)
            self.terminal.print_line(INVALID_AMOUNT)
        return amount
