"""dfamatch: a small deterministic finite automaton engine for scanning text."""

from dfamatch.core.automaton import DFA
from dfamatch.core.table import TransitionTable
from dfamatch.core.types import NO_MATCH, Match, PatternSpec

__version__ = "0.1.0"

__all__ = ["DFA", "Match", "NO_MATCH", "PatternSpec", "TransitionTable", "__version__"]
