"""
Accumulated letter knowledge across rounds.

KnowledgeStore owns four pieces of state:

  - known     : one slot per position, None or the letter confirmed there
  - excluded  : letters confirmed absent from the solution
  - misplaced : letter -> positions where it was shown present-but-wrong
  - candidates: the working word list (shrinks only on invalid-word feedback)

Invariant: `excluded` never shares a letter with `known` or `misplaced`.
That is why a round is applied in a fixed order: exact matches, then
wrong positions, then no-matches. A duplicate letter that is green in one
slot and gray in another is known present, so the gray must not exclude it.

is_word_allowed() is a pure predicate over that state; a word is admissible
iff it uses no excluded letter, agrees with every known slot, contains every
misplaced letter somewhere, and never puts a misplaced letter back at a
position already shown wrong for it.
"""

from __future__ import annotations

import copy
import logging
from typing import Dict, Iterable, List, Optional, Set

from .config import WORD_LENGTH, check_word_length
from .errors import ContractViolation, ContradictoryFeedback
from .feedback import ExactMatch, Feedback, NoMatch, WrongPosition

log = logging.getLogger(__name__)


class KnowledgeStore:

    def __init__(self, candidates: Iterable[str] = (), *, N: int = WORD_LENGTH,
                 word_source=None):
        """
        Args:
          candidates : initial ordered word list (each N letters)
          N          : configured word length
          word_source: optional collaborator with save(words); called with the
                       full candidate list whenever a guess is rejected as invalid
        """
        self.N: int = check_word_length(N)
        self.known: List[Optional[str]] = [None] * self.N
        self.excluded: Set[str] = set()
        self.misplaced: Dict[str, Set[int]] = {}
        self.candidates: List[str] = list(candidates)
        self.word_source = word_source

    # ---- feedback ----

    def apply_feedback(self, feedback: Feedback, guessed_word: str) -> None:
        """
        Fold one round of feedback into the store.

        Invalid-word feedback only drops `guessed_word` from the candidates
        and asks the word source to persist the shrunk list.
        """
        if feedback.invalid:
            self._remove_candidate(guessed_word)
            return

        feedback.validate(self.N)
        self._check_consistent(feedback)

        for lf in feedback.letters:
            if isinstance(lf, ExactMatch):
                self.known[lf.position] = lf.letter

        for lf in feedback.letters:
            if isinstance(lf, WrongPosition):
                self.misplaced.setdefault(lf.letter, set()).add(lf.position)

        for lf in feedback.letters:
            if isinstance(lf, NoMatch):
                self._process_no_match(lf.letter)

    def _process_no_match(self, letter: str) -> None:
        # A letter already seen green or yellow is present; gray only caps its count.
        if letter in self.known or letter in self.misplaced:
            return
        self.excluded.add(letter)

    def _check_consistent(self, feedback: Feedback) -> None:
        """Reject feedback that contradicts what is known, before touching any state."""
        pending = list(self.known)
        for lf in feedback.letters:
            if isinstance(lf, (ExactMatch, WrongPosition)) and lf.letter in self.excluded:
                raise ContradictoryFeedback(
                    f"letter {lf.letter!r} reported present but was already excluded")
            if isinstance(lf, ExactMatch):
                current = pending[lf.position]
                if current is not None and current != lf.letter:
                    raise ContradictoryFeedback(
                        f"position {lf.position} already known as {current!r}; "
                        f"feedback claims {lf.letter!r}")
                pending[lf.position] = lf.letter

    def _remove_candidate(self, word: str) -> None:
        before = len(self.candidates)
        self.candidates = [w for w in self.candidates if w != word]
        if len(self.candidates) != before:
            log.info("removed invalid word %r (%d candidates left)", word, len(self.candidates))
        if self.word_source is not None:
            self.word_source.save(self.candidates)

    # ---- admissibility ----

    def is_word_allowed(self, word: str) -> bool:
        if len(word) != self.N:
            raise ContractViolation(f"word {word!r} is not {self.N} letters long")
        return (not self._has_excluded_letters(word)
                and not self._has_wrong_known_letters(word)
                and not self._has_misplaced_letters(word))

    def _has_excluded_letters(self, word: str) -> bool:
        return any(ch in self.excluded for ch in word)

    def _has_wrong_known_letters(self, word: str) -> bool:
        return any(k is not None and ch != k for ch, k in zip(word, self.known))

    def _has_misplaced_letters(self, word: str) -> bool:
        for letter, positions in self.misplaced.items():
            # must be present somewhere...
            if letter not in word:
                return True
            # ...but not at a slot already shown wrong for it
            if any(word[p] == letter for p in positions):
                return True
        return False

    # ---- helpers ----

    def copy(self) -> "KnowledgeStore":
        """Independent copy of the constraint state; shares the word source."""
        other = KnowledgeStore(self.candidates, N=self.N, word_source=self.word_source)
        other.known = list(self.known)
        other.excluded = set(self.excluded)
        other.misplaced = copy.deepcopy(self.misplaced)
        return other

    def describe(self) -> str:
        """Three-line dump of known / misplaced / excluded letters."""
        known = "".join(k if k is not None else "_" for k in self.known)
        misplaced = ", ".join(
            f"{ch}@{sorted(pos)}" for ch, pos in sorted(self.misplaced.items())) or "-"
        excluded = "".join(sorted(self.excluded)) or "-"
        return (f"Known letters: {known}\n"
                f"Misplaced letters: {misplaced}\n"
                f"Excluded letters: {excluded}")
