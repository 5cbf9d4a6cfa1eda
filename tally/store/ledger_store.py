"""In-memory store for the account balance."""

from tally.domain.models import DEFAULT_BALANCE, Money


class LedgerStore:
    """Sole owner of the account balance.

    The store performs no validation; business rules live in the account
    operations that call it.
    """

    def __init__(self, initial_balance: Money = DEFAULT_BALANCE) -> None:
        self._balance = initial_balance

    def read(self) -> Money:
        """Return the current balance in cents."""
        return self._balance

    def write(self, new_balance: Money) -> None:
        """Replace the stored balance."""
        self._balance = new_balance
