"""
RNG helpers for dfamatch.

- make_rng: Create a seeded Generator
- random_text: Draw a reproducible text over a given alphabet

No module-level default_rng(): every Generator is passed explicitly, so the
same seed always produces the same texts.
"""

import numpy as np
from typing import Union


def make_rng(
    seed: Union[int, np.random.SeedSequence, None] = None,
) -> np.random.Generator:
    """
    Create a numpy Generator backed by PCG64.

    Args:
        seed: Seed for the Generator.
            - int: Converted to SeedSequence(seed)
            - SeedSequence: Used directly
            - None: Fresh OS entropy

    Returns:
        np.random.Generator backed by PCG64 bit generator.

    Examples:
        >>> rng = make_rng(42)
        >>> text = random_text("ab", 5, rng)
    """
    if seed is None:
        seed_seq = np.random.SeedSequence()
    elif isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        seed_seq = np.random.SeedSequence(int(seed))
    elif isinstance(seed, np.random.SeedSequence):
        seed_seq = seed
    else:
        raise TypeError(
            f"seed must be int, SeedSequence, or None, got {type(seed)}"
        )

    return np.random.Generator(np.random.PCG64(seed_seq))


def random_text(alphabet: str, length: int, rng: np.random.Generator) -> str:
    """
    Draw ``length`` symbols uniformly from ``alphabet``.

    Args:
        alphabet: Non-empty string; each character is one symbol.
        length: Number of symbols, >= 0.
        rng: Source of randomness.

    Returns:
        A string of exactly ``length`` characters.
    """
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if length < 0:
        raise ValueError("length must be >= 0")

    symbols = np.array(list(alphabet))
    picks = rng.integers(0, symbols.size, size=length)
    return "".join(symbols[picks].tolist())
