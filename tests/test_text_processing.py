import pytest

from rag_pipeline.text_processing import STOP_WORDS, stem, tokenize


def test_tokenize_drops_stop_words_and_short_tokens():
    assert tokenize("How do I calculate my CGPA?") == ["how", "calculate", "cgpa"]


def test_tokenize_splits_on_punctuation():
    assert tokenize("CGPA/GPA-policy, (final)") == ["cgpa", "gpa", "policy", "final"]


def test_tokenize_treats_underscore_as_separator():
    assert tokenize("student_portal") == ["student", "portal"]


def test_tokenize_keeps_order_and_duplicates():
    assert tokenize("exam Exam EXAM results") == ["exam", "exam", "exam", "results"]


@pytest.mark.parametrize("text", ["", "   ", "!!! ???", "a an the is", "to be or"])
def test_tokenize_degenerate_input_yields_nothing(text):
    assert tokenize(text) == []


def test_stop_words_cover_pronouns_and_auxiliaries():
    for word in ("the", "could", "them", "their", "being", "must"):
        assert word in STOP_WORDS


@pytest.mark.parametrize(
    "word, expected",
    [
        ("calculation", "calculate"),
        ("registering", "register"),
        ("interested", "interest"),
        ("lecturer", "lectur"),
        ("smallest", "small"),
        ("courses", "course"),
        ("calculate", "calculate"),
    ],
)
def test_stem_applies_first_matching_rule(word, expected):
    assert stem(word) == expected


@pytest.mark.parametrize("word", ["exams", "cats", "string", "longest", "closer", "rings"])
def test_stem_keeps_short_stems_intact(word):
    assert stem(word) == word


def test_stem_applies_only_one_rule():
    # "-ing" wins; the trailing "-er" of the result is not stripped again
    assert stem("registering") == "register"
