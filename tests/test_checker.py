import pytest

from adplatform.checker import ProfanityChecker

BAD_WORDS = {"питон", "змея"}


@pytest.fixture
def checker():
    return ProfanityChecker(BAD_WORDS)


@pytest.mark.parametrize("word,expected", [("питон", True), ("цветок", False)])
def test_basic_profanity(checker, word, expected):
    assert checker.with_context_analysis(False).check(word) is expected


@pytest.mark.parametrize(
    "text,expected",
    [("нормальный текст", False), ("Питон - лучший ЯП!", True)],
)
def test_context_analysis(checker, text, expected):
    assert checker.with_context_analysis(True).check(text) is expected


def test_details_list_matches(checker):
    flagged, matches, score = checker.check_with_details("питон и цветок")
    assert flagged is True
    assert matches == ["питон"]
    assert score == 0.0


def test_disguised_word_is_found(checker):
    assert checker.check("пит0н") is True


def test_repetitive_intensifiers_flagged_by_context(checker):
    text = "очень очень очень"
    assert checker.check(text) is False
    flagged, matches, score = checker.with_context_analysis(True).check_with_details(text)
    assert matches == []
    assert score >= 0.7
    assert flagged is True


def test_typo_check(checker):
    assert checker.check("питан") is False
    assert checker.with_typo_check(1, 4).check("питан") is True


def test_builders_do_not_modify_original(checker):
    configured = checker.with_typo_check(2, 5).with_context_analysis(True)
    assert (checker.typo_check, checker.context_analysis) == (False, False)
    assert (configured.max_typo_distance, configured.min_length_for_typo) == (2, 5)
    assert configured.context_analysis is True


def test_empty_text(checker):
    assert checker.check_with_details("") == (False, [], 0.0)