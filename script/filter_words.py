"""
Build the candidate word file from a full dictionary.

What it does:
- Reads a dictionary (local file, or downloaded as plain text with --url).
- Keeps only N-letter alphabetic words, lowercased.
- De-duplicates while preserving dictionary order, and writes one word per line.

Usage:
    python -m script.filter_words --in resources/words_all.txt --out resources/words_5_chars.txt
    python -m script.filter_words --url https://example.org/words.txt --N 6 --out resources/words_6_chars.txt
"""

import argparse
from pathlib import Path

import requests

from packages.datasets import filter_words, read_lines, write_lines
from packages.engine.config import DEFAULT_ALL_WORDS_PATH, DEFAULT_WORDS_PATH, WORD_LENGTH


def fetch_lines(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main(argv=None):
    ap = argparse.ArgumentParser(description="Filter a dictionary down to N-letter words")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--in", dest="inp", default=DEFAULT_ALL_WORDS_PATH, help="input dictionary file")
    src.add_argument("--url", help="download the dictionary (plain text, one word per line)")
    ap.add_argument("--out", default=DEFAULT_WORDS_PATH, help="candidate file to write")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "dictionary order")
    args = ap.parse_args(argv)

    lines = fetch_lines(args.url) if args.url else read_lines(Path(args.inp))
    words = filter_words(lines, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} {args.N}-letter words -> {args.out}")


if __name__ == "__main__":
    main()
