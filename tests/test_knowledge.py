import pytest
from packages.engine import (KnowledgeStore, Feedback, NoMatch, WrongPosition, ExactMatch,
                             ContractViolation, ContradictoryFeedback, parse_feedback, score)


class RecordingSource:
    """Stands in for a word file; remembers every rewrite."""

    def __init__(self):
        self.saves = []

    def save(self, words):
        self.saves.append(list(words))


def _state(k: KnowledgeStore):
    return list(k.known), set(k.excluded), {c: set(p) for c, p in k.misplaced.items()}


def test_green_first_letter_and_grays():
    # apple: a green, everything else gray
    k = KnowledgeStore(["apple", "adieu", "audit"], N=5)
    fb = Feedback([ExactMatch("a", 0), NoMatch("p"), NoMatch("p"), NoMatch("l"), NoMatch("e")])
    k.apply_feedback(fb, "apple")

    assert k.known == ["a", None, None, None, None]
    assert k.excluded == {"p", "l", "e"}
    assert "a" not in k.excluded
    assert k.is_word_allowed("apple") is False
    assert k.is_word_allowed("audit") is True
    # starts with 'a' but carries the excluded 'e'
    assert k.is_word_allowed("adieu") is False


def test_misplaced_letter_must_be_present_elsewhere():
    k = KnowledgeStore(N=5)
    k.apply_feedback(parse_feedback("crimp", "01000", N=5), "crimp")
    assert k.misplaced == {"r": {1}}

    assert k.is_word_allowed("zebra") is True    # r present, not at 1
    assert k.is_word_allowed("bravo") is False   # r back at 1
    assert k.is_word_allowed("zones") is False   # no r at all


def test_exact_before_no_match_for_duplicate_letter():
    # 'e' listed gray before it is listed green; it is still known present
    k = KnowledgeStore(N=5)
    fb = parse_feedback("eerie", "02000", N=5)
    assert isinstance(fb.letters[0], NoMatch) and isinstance(fb.letters[1], ExactMatch)
    k.apply_feedback(fb, "eerie")

    assert k.known[1] == "e"
    assert "e" not in k.excluded
    assert k.excluded == {"r", "i"}
    assert k.is_word_allowed("melts") is True


def test_wrong_position_before_no_match_for_duplicate_letter():
    k = KnowledgeStore(N=5)
    k.apply_feedback(score("speed", "abide"), "speed")
    assert k.misplaced == {"e": {2}, "d": {4}}
    assert "e" not in k.excluded
    assert k.excluded == {"s", "p"}
    assert k.is_word_allowed("abide") is True


def test_gray_never_excludes_letter_known_from_earlier_round():
    k = KnowledgeStore(N=5)
    k.apply_feedback(parse_feedback("trace", "00002", N=5), "trace")
    k.apply_feedback(parse_feedback("eerie", "00000", N=5), "eerie")
    assert k.known[4] == "e"
    assert "e" not in k.excluded


def test_invalid_word_removed_once_and_persisted():
    src = RecordingSource()
    k = KnowledgeStore(["crane", "sorry", "slate"], N=5, word_source=src)
    before = _state(k)

    k.apply_feedback(Feedback.invalid_word(), "sorry")
    k.apply_feedback(Feedback.invalid_word(), "sorry")

    assert k.candidates == ["crane", "slate"]
    assert src.saves == [["crane", "slate"], ["crane", "slate"]]
    assert _state(k) == before


def test_invalid_word_without_source_only_shrinks_list():
    k = KnowledgeStore(["sorry", "crane", "sorry"], N=5)
    k.apply_feedback(Feedback.invalid_word(), "sorry")
    assert k.candidates == ["crane"]
    k.apply_feedback(Feedback.invalid_word(), "nopes")
    assert k.candidates == ["crane"]


def test_apply_twice_is_idempotent():
    fb = score("crate", "zebra")
    once = KnowledgeStore(N=5)
    once.apply_feedback(fb, "crate")
    twice = once.copy()
    twice.apply_feedback(fb, "crate")
    assert _state(twice) == _state(once)


def test_reapplying_keeps_admissible_words_admissible():
    words = ["zebra", "bravo", "cobra", "abhor", "labor", "rebar"]
    k = KnowledgeStore(words, N=5)
    fb = score("crate", "zebra")
    k.apply_feedback(fb, "crate")
    admissible = [w for w in words if k.is_word_allowed(w)]
    assert "zebra" in admissible

    k.apply_feedback(fb, "crate")
    assert all(k.is_word_allowed(w) for w in admissible)


@pytest.mark.parametrize("answer,guesses", [
    ("there", ["eerie", "theme", "three", "there"]),
    ("abide", ["speed", "aside", "abide"]),
    ("llama", ["label", "hello", "llama"]),
    ("mamma", ["mommy", "amass", "magma", "mamma"]),
])
def test_excluded_disjoint_from_present_letters(answer, guesses):
    k = KnowledgeStore(N=5)
    for g in guesses:
        k.apply_feedback(score(g, answer), g)
        present = {c for c in k.known if c is not None} | set(k.misplaced)
        assert k.excluded.isdisjoint(present)
        # the real answer is never filtered out by truthful feedback
        assert k.is_word_allowed(answer)


def test_conflicting_exact_match_rejected_without_mutation():
    k = KnowledgeStore(N=5)
    k.apply_feedback(parse_feedback("crane", "20000", N=5), "crane")
    before = _state(k)

    with pytest.raises(ContradictoryFeedback):
        k.apply_feedback(parse_feedback("gruel", "20000", N=5), "gruel")
    assert _state(k) == before


def test_excluded_letter_reported_present_rejected():
    k = KnowledgeStore(N=5)
    k.apply_feedback(parse_feedback("crane", "00000", N=5), "crane")
    with pytest.raises(ContradictoryFeedback):
        k.apply_feedback(parse_feedback("brick", "01000", N=5), "brick")
    with pytest.raises(ContradictoryFeedback):
        k.apply_feedback(parse_feedback("nitro", "20000", N=5), "nitro")


def test_contract_violations():
    k = KnowledgeStore(N=5)
    with pytest.raises(ContractViolation):
        k.apply_feedback(Feedback([NoMatch("a")] * 4), "abcd")
    with pytest.raises(ContractViolation):
        k.apply_feedback(Feedback([ExactMatch("a", 7)] + [NoMatch("b")] * 4), "abbbb")
    with pytest.raises(ContractViolation):
        k.is_word_allowed("cranes")
    with pytest.raises(ContractViolation):
        KnowledgeStore(N=0)


def test_describe_dump():
    k = KnowledgeStore(N=5)
    k.apply_feedback(parse_feedback("crane", "21000", N=5), "crane")
    text = k.describe()
    assert "Known letters: c____" in text
    assert "Misplaced letters: r@[1]" in text
    assert "Excluded letters: aen" in text
