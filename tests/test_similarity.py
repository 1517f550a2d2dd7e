import pytest

from rag_pipeline.knowledge_base import Importance, KnowledgeItem
from rag_pipeline.similarity import count_word_matches, score, words_match

from conftest import CGPA_ITEM, DEADLINE_ITEM, HOSTEL_ITEM


PARKING_ITEM = KnowledgeItem(
    topic="Parking",
    category="Campus",
    question="Where can students park cars?",
    answer="Use zone B.",
    keywords=("PERMIT",),
    importance=Importance.low,
)


def test_words_match_substring_either_direction():
    assert words_match("calculate", "calculated")
    assert words_match("calculated", "calculate")


def test_words_match_on_equal_stems():
    assert words_match("calculation", "calculate")


def test_words_match_short_substring_false_positive_is_kept():
    assert words_match("art", "start")


def test_words_match_unrelated():
    assert not words_match("exam", "hostel")


def test_count_word_matches_is_pairwise():
    assert count_word_matches(["exam", "exam"], ["exam"]) == 2
    assert count_word_matches(["exam"], ["exam", "exams"]) == 2
    assert count_word_matches([], ["exam"]) == 0


def test_cgpa_query_scores_above_threshold():
    # keyword 1/3, question 3/3, topic 2/3, answer 1/3
    expected = 0.30 / 3 + 0.25 + 0.25 * 2 / 3 + 0.20 / 3
    assert score("how do I calculate my CGPA", CGPA_ITEM) == pytest.approx(expected)
    assert score("how do I calculate my CGPA", CGPA_ITEM) > 0.3


def test_keyword_component_weight_and_lowercasing():
    assert score("permit", PARKING_ITEM) == pytest.approx(0.30)


def test_exact_phrase_bonus_adds_point_three():
    with_phrase = score("apply for a hostel room", HOSTEL_ITEM)
    same_words = score("hostel room apply", HOSTEL_ITEM)
    assert with_phrase - same_words == pytest.approx(0.30)


def test_query_containing_topic_gets_bonus():
    base = score("cgpa calculation", CGPA_ITEM)
    without_bonus = score("calculation cgpa", CGPA_ITEM)
    assert base - without_bonus == pytest.approx(0.30)


def test_topic_whitespace_is_collapsed_for_bonus():
    item = CGPA_ITEM._replace(topic="CGPA   Calculation")
    assert score("my cgpa calculation", item) - score("calculation my cgpa", item) == pytest.approx(0.30)


def test_score_is_clamped_to_one():
    assert score("What is the deadline for registration?", DEADLINE_ITEM) == 1.0


@pytest.mark.parametrize("query", ["", "   ", "?!", "?", "hi", "to be or"])
def test_empty_query_scores_zero(query):
    assert score(query, CGPA_ITEM) == 0.0


def test_item_without_keywords_still_matches_on_text():
    item = CGPA_ITEM._replace(keywords=())
    assert score("cgpa", item) > 0
