"""Store layer - holds the account balance for the lifetime of the process."""

from tally.store.ledger_store import LedgerStore

__all__ = ["LedgerStore"]
