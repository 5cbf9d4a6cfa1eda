"""Domain models and rules for tally.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from the terminal and the store
"""

from tally.domain.models import DEFAULT_BALANCE, MenuChoice, Money

__all__ = ["DEFAULT_BALANCE", "MenuChoice", "Money"]
