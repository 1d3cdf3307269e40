"""
Core types for dfamatch: State, Symbol, Match, PatternSpec.

Pure data containers with validation. No matching logic.
"""

from dataclasses import dataclass

State = int
Symbol = str

# Returned by DFA.match when no accepting state is reached from the offset.
NO_MATCH = -1


def check_state(name: str, state: State) -> None:
    """Raise if ``state`` is not a non-negative integer."""
    if isinstance(state, bool) or not isinstance(state, int):
        raise TypeError(f"{name} must be an int, got {type(state).__name__}")
    if state < 0:
        raise ValueError(f"{name} must be >= 0")


def check_symbol(name: str, symbol: Symbol) -> None:
    """Raise if ``symbol`` is not a single character."""
    if not isinstance(symbol, str):
        raise TypeError(f"{name} must be a str, got {type(symbol).__name__}")
    if len(symbol) != 1:
        raise ValueError(f"{name} must be a single character, got {symbol!r}")


@dataclass(frozen=True)
class Match:
    """A matched span ``[start, end)`` of a scanned text."""

    start: int
    end: int
    text: str

    def __post_init__(self):
        """Validate span bounds."""
        if self.start < 0:
            raise ValueError("start must be >= 0")
        if self.end < self.start:
            raise ValueError("end must be >= start")
        if len(self.text) != self.end - self.start:
            raise ValueError("text length must equal end - start")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class PatternSpec:
    """
    Configuration for a ``[alphabet]+`` automaton.

    The automaton has two states: ``start_state`` moves to ``accept_state``
    on any symbol of ``alphabet``, and ``accept_state`` loops on the same
    symbols.
    """

    name: str
    alphabet: str
    start_state: State = 0
    accept_state: State = 1

    def __post_init__(self):
        """Validate PatternSpec constraints."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")
        for symbol in self.alphabet:
            check_symbol("alphabet symbol", symbol)
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("alphabet symbols must be unique")
        check_state("start_state", self.start_state)
        check_state("accept_state", self.accept_state)
        if self.start_state == self.accept_state:
            raise ValueError("start_state and accept_state must differ")
