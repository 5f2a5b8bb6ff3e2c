"""
Random Admissible selector.

Strategy:
  - Choose uniformly at random among ALL admissible candidates.
  - None when nothing is admissible (exhaustion is the driver's call).

Notes:
  - Reproducible with the same seed (BaseSelector.rng), or pass a
    pre-seeded random.Random as `rng=` to pin the choice in tests.
"""

from __future__ import annotations

from typing import List, Optional

from packages.engine import KnowledgeStore
from .base import BaseSelector, register


@register
class RandomAdmissibleSelector(BaseSelector):
    id = "random"
    name = "Random Admissible"
    version = "1.0.0"

    def pick_word(self, knowledge: KnowledgeStore) -> Optional[str]:
        pool: List[str] = list(self.admissible(knowledge))
        if not pool:
            return None

        i = self.rng.randrange(len(pool))
        return pool[i]
