from __future__ import annotations
import random
from typing import Dict, Iterator, Optional, Type

from packages.engine import KnowledgeStore

# ---- Global selector registry ----
REGISTRY: Dict[str, Type["BaseSelector"]] = {}


def register(cls: Type["BaseSelector"]) -> Type["BaseSelector"]:
    """
    Decorator: @register on a selector class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate selector id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that selectors inherit ----
class BaseSelector:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    @staticmethod
    def admissible(knowledge: KnowledgeStore) -> Iterator[str]:
        """Candidates that satisfy every constraint, in list order (recomputed each call)."""
        return (w for w in knowledge.candidates if knowledge.is_word_allowed(w))

    def pick_word(self, knowledge: KnowledgeStore) -> Optional[str]:
        raise NotImplementedError("Override in subclass")
