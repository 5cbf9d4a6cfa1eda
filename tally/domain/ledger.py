"""Pure functions for ledger calculations and input parsing.

This module contains the functional core for account operations:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

import re

from tally.domain.models import MenuChoice, Money

INSUFFICIENT_FUNDS = "Insufficient funds for this debit."

# Digits with an optional fraction, or a bare fraction. No exponents, no separators.
_AMOUNT_PATTERN = re.compile(r"(?P<sign>[+-]?)(?:(?P<units>\d+)(?:\.(?P<fraction>\d*))?|\.(?P<bare_fraction>\d+))")
_CHOICE_PATTERN = re.compile(r"[+-]?\d+")

# Keeps balances far below the digit limit of int-to-str conversion
MAX_AMOUNT_DIGITS = 1000


def parse_amount(text: str) -> Money | None:
    """Parse user text into a non-negative amount in cents.

    The whole string (ignoring surrounding whitespace) must be a plain
    decimal number. Digits past the cents must be zeros, so "1.500" is
    accepted and "1.005" is not.

    Args:
        text: Raw user input, e.g. "12.50".

    Returns:
        Amount in cents, or None if the text is not a valid non-negative number.
    """
    match = _AMOUNT_PATTERN.fullmatch(text.strip())
    if not match:
        return None

    fraction = match["fraction"] or match["bare_fraction"] or ""
    if fraction[2:].strip("0"):
        return None

    units = match["units"] or "0"
    if len(units) > MAX_AMOUNT_DIGITS:
        return None

    cents = int(units) * 100 + int(fraction[:2].ljust(2, "0"))

    if match["sign"] == "-" and cents > 0:
        return None
    return Money(cents)


def format_money(amount: Money) -> str:
    """Format cents with exactly two decimal places (e.g. 100000 -> "1000.00")."""
    units, cents = divmod(abs(amount), 100)
    sign = "-" if amount < 0 else ""
    return f"{sign}{units}.{cents:02d}"


def calculate_credit(balance: Money, amount: Money) -> Money:
    """Calculate the balance after a credit.

    Args:
        balance: Current balance in cents.
        amount: Validated non-negative amount in cents.

    Returns:
        New balance in cents.
    """
    return Money(balance + amount)


def calculate_debit(balance: Money, amount: Money) -> tuple[Money, str | None]:
    """Calculate the balance after a debit, applying overdraft protection.

    Debiting the full balance is allowed and leaves exactly zero.

    Args:
        balance: Current balance in cents.
        amount: Validated non-negative amount in cents.

    Returns:
        Tuple of (new_balance, error_message). On error the balance is unchanged.
    """
    if balance >= amount:
        return Money(balance - amount), None
    return balance, INSUFFICIENT_FUNDS


def parse_menu_choice(text: str) -> MenuChoice | None:
    """Parse a menu selection.

    Args:
        text: Raw user input, e.g. "2".

    Returns:
        The selected MenuChoice, or None if the text is not one of 1-4.
    """
    candidate = text.strip()
    if not _CHOICE_PATTERN.fullmatch(candidate):
        return None

    try:
        return MenuChoice(int(candidate))
    except ValueError:
        return None
