"""
Scan measures: match spans, per-symbol match masks and coverage.

All measures run a full left-to-right scan with DFA.finditer.
"""

import numpy as np

from dfamatch.core.automaton import DFA


def match_spans(dfa: DFA, text: str) -> np.ndarray:
    spans = [(m.start, m.end) for m in dfa.finditer(text)]
    if not spans:
        return np.empty((0, 2), dtype=np.int64)
    return np.array(spans, dtype=np.int64)


def match_mask(dfa: DFA, text: str) -> np.ndarray:
    mask = np.zeros(len(text), dtype=bool)
    for start, end in match_spans(dfa, text):
        mask[start:end] = True
    return mask


def coverage(dfa: DFA, text: str) -> float:
    if not text:
        return 0.0
    return float(match_mask(dfa, text).sum()) / float(len(text))


def skipped_text(dfa: DFA, text: str) -> str:
    mask = match_mask(dfa, text)
    return "".join(ch for ch, matched in zip(text, mask) if not matched)
