from pathlib import Path
from packages.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'Raiser' not lowercase
    words = tmp_path / "words_6.txt"
    words.write_text("raiser\ncrane\n???\nRaiser\n\n", encoding="utf-8")

    rep = validate_wordlist(6, str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3 and rep["blank_lines"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_duplicates_are_reported_not_fatal(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "crane", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])
