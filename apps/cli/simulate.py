# apps/cli/simulate.py
"""
Batch simulation: play the solver against known answers.

This script:
  1) Validates the candidate word file (prints counts + SHA).
  2) Loads candidates and answers, instantiates the requested selector.
  3) Plays one game per answer with scored feedback and a progress bar, then writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, word-file report, git commit, etc.

Usage:
    python -m apps.cli.simulate --answers resources/answers_5.txt --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from tqdm import tqdm

from packages.datasets import WordFile, validate_wordlist, pretty_summary
from packages.engine.config import DEFAULT_WORDS_PATH, WORD_LENGTH, check_word_length
from packages.harness import WORDLE_MAX_TURNS, run_case
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import DEFAULT_SELECTOR, create_selector, get_selector_ids


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Simulate solver games against known answers")
    ap.add_argument("--selector", default=DEFAULT_SELECTOR,
                    help=f"selector id (one of: {', '.join(get_selector_ids())})")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--words", default=DEFAULT_WORDS_PATH, help="candidate word file")
    ap.add_argument("--answers", help="hidden answers to play (default: the candidate file)")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="round budget per game")
    ap.add_argument("--sample", type=int, help="play only a random subset of answers")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    N = check_word_length(args.N)

    # 1) Validate and load (the candidate file is never rewritten here)
    rep = validate_wordlist(N, args.words)
    print(pretty_summary(rep))
    words = WordFile(args.words, N=N).load()
    answers = WordFile(args.answers, N=N).load() if args.answers else list(words)

    selector = create_selector(args.selector)

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        rng.shuffle(cases)
        cases = cases[: args.sample]

    # 3) Play
    results = []
    for idx, ans in enumerate(tqdm(cases, ncols=80, desc="Simulating", unit="game",
                                   disable=args.no_progress), 1):
        r = run_case(selector, ans, words=words, N=N, max_turns=args.max_turns,
                     seed=args.seed + idx)
        r["selector_id"] = selector.id
        results.append(r)

    solved = sum(1 for r in results if r["success"])
    if results:
        avg = sum(r["guesses"] for r in results if r["success"]) / max(1, solved)
        print(f"Solved {solved}/{len(results)} ({100.0 * solved / len(results):.1f}%), "
              f"avg guesses when solved: {avg:.2f}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=N)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "num_solved": solved,
        "selector_id": selector.id,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
