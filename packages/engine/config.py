"""
Session configuration.

WORD_LENGTH is the only option the core recognizes. Components take it
explicitly as `N`; the constant is just the default the CLIs start from.
"""

from __future__ import annotations

from .errors import ContractViolation

# Classic Wordle word length.
WORD_LENGTH = 5

# Default resource locations (overridable from every CLI).
DEFAULT_WORDS_PATH = "resources/words_5_chars.txt"
DEFAULT_ALL_WORDS_PATH = "resources/words_all.txt"


def check_word_length(N) -> int:
    """Return N as an int, or raise ContractViolation if it isn't a positive integer."""
    if isinstance(N, bool) or not isinstance(N, int) or N <= 0:
        raise ContractViolation(f"word length must be a positive integer; got {N!r}")
    return N
