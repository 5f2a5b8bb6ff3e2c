"""
Word source backed by a plain text file (one word per line).

WordFile is the collaborator KnowledgeStore talks to: load() supplies the
initial candidates, save() rewrites the whole file whenever a guess is
rejected as invalid, so the next session starts from the shrunk list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from packages.engine.config import WORD_LENGTH, check_word_length
from .io import read_lines, write_lines

log = logging.getLogger(__name__)


def is_clean_word(w: str, N: int) -> bool:
    """Exactly N lowercase ASCII letters."""
    return len(w) == N and w.isascii() and w.isalpha() and w.islower()


def filter_words(lines: Iterable[str], N: int) -> List[str]:
    """
    Keep N-letter alphabetic words from a raw dictionary, lowercased,
    de-duplicated, input order preserved.
    """
    seen, out = set(), []
    for raw in lines:
        w = raw.strip().lower()
        if not is_clean_word(w, N) or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


class WordFile:

    def __init__(self, path: Path | str, *, N: int = WORD_LENGTH):
        self.path = Path(path)
        self.N = check_word_length(N)

    def load(self) -> List[str]:
        """
        Read candidates in file order. Blank lines are ignored; lines that are
        not N lowercase letters are skipped with a warning.
        """
        words: List[str] = []
        skipped = 0
        for raw in read_lines(self.path):
            w = raw.strip()
            if not w:
                continue
            if is_clean_word(w, self.N):
                words.append(w)
            else:
                skipped += 1
        if skipped:
            log.warning("%s: skipped %d line(s) that are not %d-letter lowercase words",
                        self.path, skipped, self.N)
        log.debug("loaded %d candidates from %s", len(words), self.path)
        return words

    def save(self, words: Iterable[str]) -> str:
        """Rewrite the whole file with `words` (never appends)."""
        words = list(words)
        out = write_lines(words, self.path)
        log.info("rewrote %s with %d candidates", self.path, len(words))
        return out
