# apps/cli/solve.py
"""
Interactive solver.

This script:
  1) Loads the candidate word file (one word per line).
  2) Repeatedly proposes a word, reads your feedback for it and narrows the
     candidates until nothing is left or you stop (Ctrl-D / Ctrl-C).
  3) When you answer 'n' (not a word) the word is dropped and the word file
     is rewritten, so later sessions never propose it again.

Usage:
    python -m apps.cli.solve --words resources/words_5_chars.txt
"""

from __future__ import annotations

import argparse
import logging

from packages.datasets import WordFile, validate_wordlist, pretty_summary
from packages.engine import Feedback, KnowledgeStore
from packages.engine.config import DEFAULT_WORDS_PATH, WORD_LENGTH, check_word_length
from packages.harness import EXHAUSTED, SOLVED, TerminalFeedback, run_session
from packages.solvers import DEFAULT_SELECTOR, create_selector, get_selector_ids


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Interactive five-letter word game solver")
    ap.add_argument("--words", default=DEFAULT_WORDS_PATH,
                    help="candidate word file (rewritten when a word is rejected)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--selector", default=DEFAULT_SELECTOR,
                    help=f"selector id (one of: {', '.join(get_selector_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed for the random selector")
    ap.add_argument("--no-rewrite", action="store_true",
                    help="never rewrite the word file on rejected words")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def print_round(round_no: int, word: str, feedback: Feedback, knowledge: KnowledgeStore) -> None:
    if feedback.invalid:
        print(f"Dropped {word!r}; {len(knowledge.candidates)} candidates left.")
    print(knowledge.describe())


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    N = check_word_length(args.N)

    rep = validate_wordlist(N, args.words)
    print(pretty_summary(rep))

    source = WordFile(args.words, N=N)
    knowledge = KnowledgeStore(source.load(), N=N,
                               word_source=None if args.no_rewrite else source)
    selector = create_selector(args.selector)
    selector.reset(seed=args.seed)

    def ask(word: str):
        print(f"Selected word: {word}")
        return feedback_source(word)

    feedback_source = TerminalFeedback(N=N)
    res = run_session(knowledge, selector, ask, on_round=print_round)

    if res.reason == EXHAUSTED:
        print("Couldn't pick word. Exiting.")
    elif res.reason == SOLVED:
        print(f"Solved in {res.rounds} round(s): {res.last_word}")
    else:
        print("Stopped.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
