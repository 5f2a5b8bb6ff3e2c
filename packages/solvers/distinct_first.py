"""
Distinct-Letters-First selector.

Prefers the first admissible word whose letters are all different: early on
this spends a guess on five new letters instead of four. When no admissible
word has distinct letters it falls back to the first admissible word, so a
non-empty admissible set never looks exhausted.
"""

from __future__ import annotations

from typing import Optional

from packages.engine import KnowledgeStore
from .base import BaseSelector, register


def has_repeating_letters(word: str) -> bool:
    return len(set(word)) != len(word)


@register
class DistinctFirstSelector(BaseSelector):
    id = "distinct_first"
    name = "Distinct Letters First"
    version = "1.0.0"

    def pick_word(self, knowledge: KnowledgeStore) -> Optional[str]:
        fallback: Optional[str] = None
        for w in self.admissible(knowledge):
            if not has_repeating_letters(w):
                return w
            if fallback is None:
                fallback = w
        return fallback
