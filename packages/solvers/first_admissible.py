"""
First Admissible selector (default).

Returns the first candidate, in word-list order, that is consistent with
everything learned so far. Fully deterministic: the same list and the same
feedback always yield the same guesses.
"""

from __future__ import annotations

from typing import Optional

from packages.engine import KnowledgeStore
from .base import BaseSelector, register


@register
class FirstAdmissibleSelector(BaseSelector):
    id = "first"
    name = "First Admissible"
    version = "1.0.0"

    def pick_word(self, knowledge: KnowledgeStore) -> Optional[str]:
        return next(self.admissible(knowledge), None)
