import pytest
from packages.engine import (score, parse_feedback, Feedback, NoMatch, WrongPosition,
                             ExactMatch, ContractViolation, FeedbackFormatError,
                             check_word_length)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","02111"),
    ("level","level","22222"),
    ("lemon","level","22000"),
    ("cools","scoop","11201"),
    ("scoop","scoop","22222"),
    ("raise","crane","11002"),
    ("stare","crane","00212"),
    ("eerie","there","10102"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer).to_symbols() == expected

# --- N=6 samples ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","022211"),
    ("little","letter","202201"),
    ("planet","palate","211011"),
    ("kitten","tinket","121121"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer).to_symbols() == expected

def test_score_length_mismatch():
    with pytest.raises(ContractViolation):
        score("crane", "cranes")

def test_parse_feedback_symbols():
    fb = parse_feedback("crane", "02100\n", N=5)
    assert fb.invalid is False
    assert fb.letters == [NoMatch("c"), ExactMatch("r", 1), WrongPosition("a", 2),
                          NoMatch("n"), NoMatch("e")]
    assert fb.to_symbols() == "02100"

@pytest.mark.parametrize("raw", ["n", "N", "nope", "  n  "])
def test_parse_feedback_invalid_word(raw):
    fb = parse_feedback("sorry", raw, N=5)
    assert fb.invalid is True and fb.letters == []
    assert fb.to_symbols() == "n"

@pytest.mark.parametrize("raw", ["0210", "021000", "02x00", ""])
def test_parse_feedback_malformed(raw):
    with pytest.raises(FeedbackFormatError):
        parse_feedback("crane", raw, N=5)

def test_feedback_validate():
    Feedback.invalid_word().validate(5)
    with pytest.raises(ContractViolation):
        Feedback([NoMatch("a")] * 4).validate(5)
    with pytest.raises(ContractViolation):
        Feedback([ExactMatch("a", 5)] + [NoMatch("b")] * 4).validate(5)
    with pytest.raises(ContractViolation):
        Feedback([WrongPosition("a", -1)] + [NoMatch("b")] * 4).validate(5)

def test_feedback_is_solved():
    assert score("crane", "crane").is_solved(5)
    assert not score("crane", "crate").is_solved(5)
    assert not Feedback.invalid_word().is_solved(5)

@pytest.mark.parametrize("bad", [0, -1, 5.0, "5", True, None])
def test_check_word_length_rejects(bad):
    with pytest.raises(ContractViolation):
        check_word_length(bad)
