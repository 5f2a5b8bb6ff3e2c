from pathlib import Path

import pytest
from packages.datasets import WordFile, filter_words, read_lines, write_lines
from packages.engine import KnowledgeStore, Feedback


def test_load_keeps_order_and_skips_junk(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\n\nsorry\nCRANE\ntoolong\nslate\n", encoding="utf-8")
    assert WordFile(p, N=5).load() == ["crane", "sorry", "slate"]


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordFile(tmp_path / "missing.txt").load()


def test_save_is_full_rewrite_with_trailing_newlines(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nsorry\nslate\nextra\n", encoding="utf-8")
    WordFile(p, N=5).save(["slate", "crane"])
    assert p.read_text(encoding="utf-8") == "slate\ncrane\n"


def test_write_lines_drops_blanks_and_handles_empty(tmp_path: Path):
    p = tmp_path / "sub" / "out.txt"
    write_lines(["crane", "", "  ", "slate"], p)
    assert p.read_text(encoding="utf-8") == "crane\nslate\n"
    write_lines([], p)
    assert p.read_text(encoding="utf-8") == ""
    assert read_lines(p) == []


def test_invalid_word_rewrites_word_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nsorry\nslate\n", encoding="utf-8")
    src = WordFile(p, N=5)
    k = KnowledgeStore(src.load(), N=5, word_source=src)

    k.apply_feedback(Feedback.invalid_word(), "sorry")
    assert p.read_text(encoding="utf-8") == "crane\nslate\n"
    # next session reads back the shrunk list
    assert WordFile(p, N=5).load() == ["crane", "slate"]


def test_filter_words():
    raw = ["Crane", "apple", "it's", "abc", "crane", " slate ", "émigré", "sixsix"]
    assert filter_words(raw, 5) == ["crane", "apple", "slate"]
    assert filter_words(raw, 6) == ["sixsix"]
