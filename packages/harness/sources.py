"""
Feedback sources: where a round's classifications come from.

Every source is a callable `source(word) -> Feedback | None`; returning None
asks the driver to stop.

- TerminalFeedback : a person types 0/1/2 per letter (or 'n' for "not a word")
- ScriptedFeedback : scores the guess against a known answer
- ReplayFeedback   : replays pre-typed symbol lines, then stops
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from packages.engine import Feedback, FeedbackFormatError, parse_feedback, score
from packages.engine.config import WORD_LENGTH

INSTRUCTIONS = (
    "0 - letter not present in word\n"
    "1 - letter present but in wrong position\n"
    "2 - letter in exact position\n"
    "n - word is not recognized as a valid word"
)


class TerminalFeedback:

    def __init__(self, *, N: int = WORD_LENGTH,
                 input_fn: Callable[[str], str] | None = None,
                 output: Callable[[str], None] | None = None):
        self.N = N
        self.input_fn = input_fn or input
        self.output = output or print

    def __call__(self, word: str) -> Optional[Feedback]:
        self.output(INSTRUCTIONS)
        while True:
            try:
                raw = self.input_fn("> ")
            except (EOFError, KeyboardInterrupt):
                return None
            try:
                return parse_feedback(word, raw, self.N)
            except FeedbackFormatError as e:
                self.output(f"Wrong input: {e}")


class ScriptedFeedback:

    def __init__(self, answer: str, *, allowed: Iterable[str] | None = None):
        self.answer = answer.strip().lower()
        self.allowed = None if allowed is None else {w.strip().lower() for w in allowed}

    def __call__(self, word: str) -> Feedback:
        if self.allowed is not None and word not in self.allowed:
            return Feedback.invalid_word()
        return score(word, self.answer)


class ReplayFeedback:
    """Answers round i with the i-th line of `lines`; stops when they run out."""

    def __init__(self, lines: Iterable[str], *, N: int = WORD_LENGTH):
        self.N = N
        self._lines: Iterator[str] = iter(lines)

    def __call__(self, word: str) -> Optional[Feedback]:
        raw = next(self._lines, None)
        if raw is None:
            return None
        return parse_feedback(word, raw, self.N)
