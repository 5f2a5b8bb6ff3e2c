"""
Word-file validator.

What this module does:
- Validate a candidate word file (words_N.txt) before a session starts.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Count duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Duplicates are reported but do not fail validation: a repeated candidate is
harmless to the solver, it is just checked twice.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "resources/words_5_chars.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .wordsource import is_clean_word


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordFileReport:
    """Diagnostics and metadata for one word file."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # lines that are not clean N-letter words
    blank_lines: int     # empty/whitespace-only lines
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
            elif is_clean_word(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a candidate word file for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordFileReport schema). `passed`
        requires an existing, non-empty file with no invalid or blank lines.
    """
    p = Path(path)
    if not p.exists():
        rep = WordFileReport(N, path, False, 0, "", 0, 0, 0, False,
                             [f"word file not found: {path}"])
        return asdict(rep)

    words, invalid, blank = _load_and_check(p, N)
    unique = len(set(words))
    issues: List[str] = []

    if not words:
        issues.append("word file contains 0 valid words")
    if invalid:
        issues.append(f"word file has {invalid} invalid line(s)")
    if blank:
        issues.append(f"word file has {blank} blank line(s)")
    if unique != len(words):
        issues.append(f"word file contains {len(words) - unique} duplicate line(s)")

    rep = WordFileReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique,
        invalid_lines=invalid,
        blank_lines=blank,
        passed=bool(words) and invalid == 0 and blank == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=15917 (uniq=15917, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
