"""
similarity.py
=============
Lexical similarity between a free-text query and one KnowledgeItem.

Score (clamped to 1.0):

    0.30 × keyword hits   / max(|query words|, 1)
  + 0.25 × question hits  / max(|query words|, 1)
  + 0.25 × topic hits     / max(|query words|, 1)
  + 0.20 × answer hits    / max(|query words|, 1)
  + 0.30   exact-phrase bonus

Two words match when either contains the other or their stems are equal.
Question/topic/answer hits are *pairwise* counts, so a word repeated in the
query or in the field counts once per pair.  This makes a single field able
to push its component above its nominal weight; the final clamp absorbs it.

Cost is O(|query words| × |field words|) per field per item, fine for a few
hundred entries and single-sentence queries.  Replacing it with an inverted
index would change the pairwise counts and therefore the scores.
"""

from __future__ import annotations

import re
from typing import Sequence

from rag_pipeline.knowledge_base import KnowledgeItem
from rag_pipeline.text_processing import stem, tokenize

KEYWORD_WEIGHT  = 0.30
QUESTION_WEIGHT = 0.25
TOPIC_WEIGHT    = 0.25
ANSWER_WEIGHT   = 0.20
EXACT_PHRASE_BONUS = 0.30

_WHITESPACE_RE = re.compile(r"\s+")


def words_match(a: str, b: str) -> bool:
    # Substring containment also matches unrelated words ("art" / "start").
    return a in b or b in a or stem(a) == stem(b)


def count_word_matches(words_a: Sequence[str], words_b: Sequence[str]) -> int:
    """Number of (a, b) pairs that match."""
    return sum(1 for a in words_a for b in words_b if words_match(a, b))


def score(query: str, item: KnowledgeItem) -> float:
    """Return the similarity of ``item`` to ``query`` in [0, 1]."""
    query_lower = query.lower()
    query_words = tokenize(query_lower)
    denominator = max(len(query_words), 1)

    keywords = [k.lower() for k in item.keywords]
    keyword_hits = sum(
        1 for word in query_words if any(words_match(word, kw) for kw in keywords)
    )

    similarity  = keyword_hits / denominator * KEYWORD_WEIGHT
    similarity += count_word_matches(query_words, tokenize(item.question)) / denominator * QUESTION_WEIGHT
    similarity += count_word_matches(query_words, tokenize(item.topic)) / denominator * TOPIC_WEIGHT
    similarity += count_word_matches(query_words, tokenize(item.answer)) / denominator * ANSWER_WEIGHT

    # A query with no meaningful tokens ("hi", "?") scores 0 outright
    if query_words:
        question_lower = item.question.lower()
        topic_lower = _WHITESPACE_RE.sub(" ", item.topic.lower())
        if query_lower in question_lower or topic_lower in query_lower:
            similarity += EXACT_PHRASE_BONUS

    return min(similarity, 1.0)
