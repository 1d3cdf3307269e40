"""
Command-line driver: scan text with one of the example automata.

Usage: dfamatch --pattern digits "abba 01.01.2017 xyzzy 02.02.2017"
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from dfamatch.tasks.patterns import PATTERNS, make_pattern_dfa


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="dfamatch", description="Print every match of a pattern automaton in a text.")
    ap.add_argument("text", nargs="?", help="Text to scan (read from stdin when omitted)")
    ap.add_argument("--pattern", choices=sorted(PATTERNS), default="digits", help="Automaton to scan with")
    ap.add_argument("--spans", action="store_true", help="Print 'start end text' for each match")
    ap.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    text = args.text if args.text is not None else sys.stdin.read()
    dfa = make_pattern_dfa(args.pattern)
    logging.debug("built %r for pattern %s", dfa, args.pattern)

    n_matches = 0
    for m in dfa.finditer(text):
        if args.spans:
            print(m.start, m.end, m.text)
        else:
            print(m.text)
        n_matches += 1

    logging.info("%d match(es) for pattern %s", n_matches, args.pattern)
    return 0


if __name__ == "__main__":
    sys.exit(main())
