"""
Per-round feedback.

A round's result is one classification per letter of the guessed word:

  - NoMatch(letter)                 : letter is not in the solution
  - WrongPosition(letter, position) : letter is in the solution, elsewhere
  - ExactMatch(letter, position)    : letter sits exactly at `position`

or, instead of classifications, an "invalid word" flag meaning the guess
was rejected as not being a recognized word.

Terminal symbols (see parse_feedback):
  '0' -> NoMatch, '1' -> WrongPosition, '2' -> ExactMatch,
  leading 'n' -> invalid word.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from .errors import ContractViolation, FeedbackFormatError


@dataclass(frozen=True)
class NoMatch:
    letter: str


@dataclass(frozen=True)
class WrongPosition:
    letter: str
    position: int


@dataclass(frozen=True)
class ExactMatch:
    letter: str
    position: int


LetterFeedback = Union[NoMatch, WrongPosition, ExactMatch]

# Symbol <-> classification mapping used by the terminal codec and reports.
SYMBOLS = {NoMatch: "0", WrongPosition: "1", ExactMatch: "2"}
INVALID_SYMBOL = "n"


@dataclass
class Feedback:
    letters: List[LetterFeedback] = field(default_factory=list)
    invalid: bool = False

    @classmethod
    def invalid_word(cls) -> "Feedback":
        """Feedback for a guess the game refused to accept."""
        return cls(letters=[], invalid=True)

    def validate(self, N: int) -> None:
        """
        Raise ContractViolation unless this feedback is well-formed for
        words of length N. Invalid-word feedback carries no letters and
        always passes.
        """
        if self.invalid:
            return
        if len(self.letters) != N:
            raise ContractViolation(
                f"feedback must classify exactly {N} letters; got {len(self.letters)}")
        for lf in self.letters:
            if not isinstance(lf, (NoMatch, WrongPosition, ExactMatch)):
                raise ContractViolation(f"unknown letter classification: {lf!r}")
            if isinstance(lf, (WrongPosition, ExactMatch)) and not 0 <= lf.position < N:
                raise ContractViolation(
                    f"position {lf.position} out of range for word length {N}")

    def is_solved(self, N: int) -> bool:
        """True iff every one of the N letters is an exact match."""
        return (not self.invalid
                and len(self.letters) == N
                and all(isinstance(lf, ExactMatch) for lf in self.letters))

    def to_symbols(self) -> str:
        """Render as the terminal symbol string, e.g. "20110" or "n"."""
        if self.invalid:
            return INVALID_SYMBOL
        return "".join(SYMBOLS[type(lf)] for lf in self.letters)


def parse_feedback(word: str, raw: str, N: int) -> Feedback:
    """
    Parse one line of operator input for `word`.

    Args:
      word : the guess the feedback refers to (supplies the letters)
      raw  : typed line, e.g. "02110", or anything starting with 'n'
      N    : configured word length

    Raises:
      FeedbackFormatError on wrong length or unknown symbols.
    """
    text = raw.strip().lower()
    if text.startswith(INVALID_SYMBOL):
        return Feedback.invalid_word()

    if len(word) != N:
        raise ContractViolation(f"selected word {word!r} is not {N} letters long")
    if len(text) != N:
        raise FeedbackFormatError(f"feedback should be {N} symbols; got {len(text)}")

    letters: List[LetterFeedback] = []
    for i, (ch, sym) in enumerate(zip(word, text)):
        if sym == "0":
            letters.append(NoMatch(ch))
        elif sym == "1":
            letters.append(WrongPosition(ch, i))
        elif sym == "2":
            letters.append(ExactMatch(ch, i))
        else:
            raise FeedbackFormatError(f"unrecognized symbol {sym!r}; use only 0, 1, 2 or n")
    return Feedback(letters=letters)
