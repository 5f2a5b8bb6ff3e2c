"""
Wordle-style scoring of a guess against a hidden answer.

Produces the same Feedback a person would type in, so simulations and
tests can drive the solver without a terminal.

Duplicate handling is the canonical two-pass rule:
  1) mark exact matches and count the answer's unmatched letters
  2) mark wrong-position only while that letter still has unmatched copies;
     everything else is a no-match
"""

from collections import Counter
from typing import List

from .errors import ContractViolation
from .feedback import ExactMatch, Feedback, LetterFeedback, NoMatch, WrongPosition


def score(guess: str, answer: str) -> Feedback:
    """
    Examples (as symbol strings):
      score("belle", "level").to_symbols() -> "02111"
      score("lemon", "level").to_symbols() -> "22000"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ContractViolation("guess and answer must be the same length")

    letters: List[LetterFeedback] = [NoMatch(g) for g in guess]

    # Pass 1: exact matches; collect leftover answer letters.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            letters[i] = ExactMatch(g, i)
        else:
            remaining[a] += 1

    # Pass 2: wrong-position capped by true multiplicity.
    for i, g in enumerate(guess):
        if isinstance(letters[i], ExactMatch):
            continue
        if remaining[g] > 0:
            letters[i] = WrongPosition(g, i)
            remaining[g] -= 1

    return Feedback(letters=letters)
