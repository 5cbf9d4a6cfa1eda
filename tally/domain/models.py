"""Domain type definitions for tally.

- Money: Amount in cents (minor units)
- MenuChoice: Action selected from the main menu
"""

from enum import IntEnum
from typing import NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Balance a fresh ledger starts with (1000.00)
DEFAULT_BALANCE = Money(100000)


class MenuChoice(IntEnum):
    """Actions offered by the main menu, keyed by their menu number."""

    VIEW_BALANCE = 1
    CREDIT = 2
    DEBIT = 3
    EXIT = 4
