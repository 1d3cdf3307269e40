from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from dfamatch.core.table import TransitionTable
from dfamatch.core.types import NO_MATCH, Match, State, Symbol, check_state

logger = logging.getLogger(__name__)


class DFA:
    """
    Deterministic finite automaton used to find pattern matches in text.

    The start state and the accepting states are fixed at construction;
    transitions are added afterwards with ``add`` / ``add_all``. Matching
    never mutates the automaton, so a fully built DFA can be shared by
    concurrent scans.
    """

    def __init__(self, start_state: State, accept_states: Iterable[State]):
        check_state("start_state", start_state)
        accept = frozenset(accept_states)
        if not accept:
            raise ValueError("accept_states must not be empty")
        for state in accept:
            check_state("accept state", state)

        self.start_state = start_state
        self.accept_states: frozenset[State] = accept
        self.table = TransitionTable()

    def add(self, src: State, symbol: Symbol, dst: State) -> None:
        """Add the transition ``src --symbol--> dst``, replacing any previous one."""
        self.table.add(src, symbol, dst)

    def add_all(self, src: State, symbols: Iterable[Symbol], dst: State) -> None:
        """Add ``src --symbol--> dst`` for every symbol, in order."""
        self.table.add_all(src, symbols, dst)

    def next_state(self, state: State, symbol: Symbol) -> Optional[State]:
        """Return the successor of ``state`` on ``symbol``, or None if there is no transition."""
        return self.table.lookup(state, symbol)

    def is_accepting(self, state: State) -> bool:
        return state in self.accept_states

    def match(self, text: str, start: int = 0) -> int:
        """
        Match the automaton against ``text`` anchored at ``start``.

        Consumes symbols greedily until a symbol has no transition or the
        text ends. The symbol that stops the run is not consumed.

        Args:
            text: Text to scan.
            start: Offset of the first symbol, ``0 <= start <= len(text)``.

        Returns:
            Index just past the consumed prefix if the run ends in an
            accepting state (``start`` itself when nothing was consumed),
            otherwise ``NO_MATCH``.
        """
        if not (0 <= start <= len(text)):
            raise ValueError(f"start must be in [0, {len(text)}], got {start}")

        state = self.start_state
        i = start
        while i < len(text):
            nxt = self.table.lookup(state, text[i])
            if nxt is None:
                break
            state = nxt
            i += 1

        if state in self.accept_states:
            return i
        return NO_MATCH

    def accepts(self, text: str) -> bool:
        """True if the whole of ``text`` is recognized."""
        return self.match(text, 0) == len(text)

    def finditer(self, text: str) -> Iterator[Match]:
        """
        Yield non-overlapping matches left to right.

        At each position the longest match is taken and scanning resumes
        after it. Positions with no match are skipped one symbol at a time.
        An empty match is yielded and then skipped past, so the scan always
        moves forward.
        """
        i = 0
        while i < len(text):
            end = self.match(text, i)
            if end < 0:
                i += 1
                continue

            yield Match(start=i, end=end, text=text[i:end])
            i = end if end > i else i + 1

    def find_all(self, text: str) -> list[str]:
        """Return every matched substring of ``text``, in order."""
        found = [m.text for m in self.finditer(text)]
        logger.debug("scanned %d symbols, %d matches", len(text), len(found))
        return found

    def __repr__(self) -> str:
        return (
            f"DFA(start_state={self.start_state}, "
            f"accept_states={sorted(self.accept_states)}, transitions={len(self.table)})"
        )
