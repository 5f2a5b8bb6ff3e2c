from __future__ import annotations
import random
from typing import List
from .base import BaseSelector, REGISTRY, register

from . import first_admissible  # noqa: F401
from . import random_admissible  # noqa: F401
from . import distinct_first  # noqa: F401

DEFAULT_SELECTOR = "first"


def create_selector(selector_id: str = DEFAULT_SELECTOR, *,
                    rng: random.Random | None = None) -> BaseSelector:
    """
    Factory: instantiate a registered selector by id.
    """
    try:
        cls = REGISTRY[selector_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown selector id: {selector_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(rng=rng)


def get_selector_ids() -> List[str]:
    """
    Return all registered selector ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
