from __future__ import annotations

import string

from dfamatch.core.automaton import DFA
from dfamatch.core.types import PatternSpec

DIGITS = PatternSpec(name="digits", alphabet=string.digits)
LETTERS = PatternSpec(name="letters", alphabet=string.ascii_lowercase)

PATTERNS: dict[str, PatternSpec] = {spec.name: spec for spec in (DIGITS, LETTERS)}


def build_repeat_dfa(spec: PatternSpec) -> DFA:
    """Build the two-state automaton for ``[alphabet]+``."""
    dfa = DFA(spec.start_state, {spec.accept_state})
    dfa.add_all(spec.start_state, spec.alphabet, spec.accept_state)
    dfa.add_all(spec.accept_state, spec.alphabet, spec.accept_state)
    return dfa


def make_digits_dfa() -> DFA:
    return build_repeat_dfa(DIGITS)


def make_letters_dfa() -> DFA:
    return build_repeat_dfa(LETTERS)


def make_pattern_dfa(name: str) -> DFA:
    if name not in PATTERNS:
        raise ValueError(f"unknown pattern: {name!r} (expected one of {sorted(PATTERNS)})")
    return build_repeat_dfa(PATTERNS[name])
