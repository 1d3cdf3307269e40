"""
Randomized end-to-end scan properties over seeded texts.
"""

from __future__ import annotations

import pytest

from dfamatch.core.automaton import DFA
from dfamatch.core.rng import make_rng, random_text
from dfamatch.core.types import NO_MATCH
from dfamatch.measures.coverage import match_mask, skipped_text


ALPHABET = "ab01 ."
N_TEXTS = 40


def _texts(seed: int) -> list[str]:
    rng = make_rng(seed)
    lengths = rng.integers(0, 60, size=N_TEXTS)
    return [random_text(ALPHABET, int(n), rng) for n in lengths]


def _make_ab_star_b_dfa() -> DFA:
    # a*b with a dead-end on "bb": exercises runs that end non-accepting
    dfa = DFA(0, {1})
    dfa.add(0, "a", 0)
    dfa.add(0, "b", 1)
    dfa.add(1, "b", 2)
    return dfa


def _automata() -> list[DFA]:
    from dfamatch.tasks.patterns import make_digits_dfa, make_letters_dfa

    optional_digits = DFA(0, {0})
    optional_digits.add_all(0, "01", 0)
    return [make_digits_dfa(), make_letters_dfa(), _make_ab_star_b_dfa(), optional_digits]


@pytest.mark.parametrize("dfa_index", range(4))
def test_match_result_in_range(dfa_index: int) -> None:
    dfa = _automata()[dfa_index]
    for text in _texts(11):
        for start in range(len(text) + 1):
            m = dfa.match(text, start)
            assert m == NO_MATCH or start <= m <= len(text)


@pytest.mark.parametrize("dfa_index", range(4))
def test_match_is_greedy(dfa_index: int) -> None:
    dfa = _automata()[dfa_index]
    for text in _texts(22):
        for start in range(len(text) + 1):
            m = dfa.match(text, start)
            if m <= start or m == len(text):
                continue
            state = dfa.start_state
            for symbol in text[start:m]:
                state = dfa.next_state(state, symbol)
                assert state is not None
            assert dfa.next_state(state, text[m]) is None


@pytest.mark.parametrize("dfa_index", range(4))
def test_find_all_partitions_text(dfa_index: int) -> None:
    dfa = _automata()[dfa_index]
    for text in _texts(33):
        matches = list(dfa.finditer(text))

        starts = [m.start for m in matches]
        assert starts == sorted(set(starts))
        for prev, cur in zip(matches, matches[1:]):
            assert prev.end <= cur.start

        # every symbol is matched exactly once or skipped
        rebuilt = []
        pos = 0
        for m in matches:
            rebuilt.append(text[pos:m.start])
            rebuilt.append(m.text)
            pos = m.end
        rebuilt.append(text[pos:])
        assert "".join(rebuilt) == text

        assert [m.text for m in matches] == dfa.find_all(text)
        assert int(match_mask(dfa, text).sum()) + len(skipped_text(dfa, text)) == len(text)


def test_scan_with_shared_automaton_is_stable(deterministic_rng) -> None:
    """Repeated scans with one automaton give identical results."""
    from dfamatch.tasks.patterns import make_digits_dfa

    dfa = make_digits_dfa()
    text = random_text(ALPHABET, 500, deterministic_rng)
    first = dfa.find_all(text)
    n_transitions = len(dfa.table)

    assert dfa.find_all(text) == first
    assert len(dfa.table) == n_transitions
    assert "".join(first) == "".join(ch for ch in text if ch in "01")
