"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, word-file report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Symbol strings are prefixed with an apostrophe to keep spreadsheet apps
  from reading "02110" as the number 2110.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_symbols(symbols: str) -> str:
    """
    Example: "02110" -> "'02110"
    """
    return "'" + symbols if symbols else symbols


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      selector, N, answer, success, reason, guesses, time_ms,
      guess_1, fb_1, guess_2, fb_2, ..., guess_max_turns, fb_max_turns

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["selector", "N", "answer", "success", "reason", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"fb_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "selector": r.get("selector_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "reason": r.get("reason", ""),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, symbols = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"fb_{i}"] = _excel_safe_symbols(symbols)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"fb_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (selector, N, paths, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_cases, num_solved
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
