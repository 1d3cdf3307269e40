"""
Pytest configuration and fixtures for dfamatch tests.

Provides deterministic RNG and the example digit / letter automata.
"""

import pytest


@pytest.fixture
def deterministic_rng():
    """
    Create a deterministic RNG seeded with 12345.

    Used for randomized scans so failures are reproducible.
    """
    from dfamatch.core.rng import make_rng
    return make_rng(12345)


@pytest.fixture
def digits_dfa():
    """[0-9]+ automaton: state 0 -> 1 on a digit, 1 loops on digits."""
    from dfamatch.tasks.patterns import make_digits_dfa
    return make_digits_dfa()


@pytest.fixture
def letters_dfa():
    """[a-z]+ automaton built the same way as digits_dfa."""
    from dfamatch.tasks.patterns import make_letters_dfa
    return make_letters_dfa()


@pytest.fixture
def empty_accepting_dfa():
    """Start state is accepting and has no outgoing transitions."""
    from dfamatch.core.automaton import DFA
    return DFA(0, {0})
