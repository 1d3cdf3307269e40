from __future__ import annotations

import logging
from typing import Iterable, Optional

from dfamatch.core.types import State, Symbol, check_state, check_symbol

logger = logging.getLogger(__name__)


class TransitionTable:
    """
    Sparse transition table: (state, symbol) -> next state.

    Entries are stored per source state. A pair without an entry means
    there is no valid transition; ``lookup`` reports it as ``None`` whether
    the source state is unknown or only the symbol is missing.
    """

    def __init__(self) -> None:
        self._rows: dict[State, dict[Symbol, State]] = {}

    def add(self, src: State, symbol: Symbol, dst: State) -> None:
        check_state("src", src)
        check_symbol("symbol", symbol)
        check_state("dst", dst)

        row = self._rows.setdefault(src, {})
        previous = row.get(symbol)
        if previous is not None and previous != dst:
            logger.debug("overwriting transition (%d, %r): %d -> %d", src, symbol, previous, dst)
        row[symbol] = dst

    def add_all(self, src: State, symbols: Iterable[Symbol], dst: State) -> None:
        for symbol in symbols:
            self.add(src, symbol, dst)

    def lookup(self, state: State, symbol: Symbol) -> Optional[State]:
        row = self._rows.get(state)
        if row is None:
            return None
        return row.get(symbol)

    def states(self) -> set[State]:
        found = set(self._rows)
        for row in self._rows.values():
            found.update(row.values())
        return found

    def alphabet(self) -> set[Symbol]:
        return {symbol for row in self._rows.values() for symbol in row}

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        state, symbol = pair
        return self.lookup(state, symbol) is not None

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows.values())
