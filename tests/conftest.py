"""Shared fixtures for tally tests."""

import pytest

from tally.commands.operations import AccountOperations
from tally.errors import InputClosedError
from tally.store.ledger_store import LedgerStore
from tally.terminal import Terminal


class ScriptedTerminal(Terminal):
    """Terminal that replays canned input lines and records output."""

    def __init__(self, inputs: list[str] | None = None) -> None:
        super().__init__()
        self.inputs = list(inputs or [])
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def prompt_line(self, prompt_text: str) -> str:
        if self.closed:
            raise InputClosedError("Terminal is closed")
        self.prompts.append(prompt_text)
        if not self.inputs:
            raise InputClosedError("No more input")
        return self.inputs.pop(0)

    def print_line(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture
def terminal() -> ScriptedTerminal:
    return ScriptedTerminal()


@pytest.fixture
def store() -> LedgerStore:
    return LedgerStore()


@pytest.fixture
def operations(store: LedgerStore, terminal: ScriptedTerminal) -> AccountOperations:
    return AccountOperations(store, terminal)
