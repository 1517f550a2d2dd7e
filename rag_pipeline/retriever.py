"""
retriever.py
============
Ranked lexical retrieval over the university knowledge base.

Strategy:
  1. Similarity — every item is scored against the query by
     similarity.score() (keyword / question / topic / answer overlap plus an
     exact-phrase bonus).

  2. Importance weighting — relevance = similarity × importance multiplier
     (high 1.3, medium 1.1, low 1.0), so policy-critical entries such as
     deadlines and appeals surface ahead of equally similar trivia.

  3. Threshold + rank — items below ``min_similarity`` (raw similarity, not
     relevance) are dropped; the rest are sorted by relevance, best first.
     Ties keep knowledge-base order.

Returns: ordered list of SearchResult, possibly empty.  An empty list means
"no relevant knowledge" and is never an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Iterable, List, Optional

from rag_pipeline.knowledge_base import (
    Importance,
    KnowledgeBase,
    KnowledgeItem,
    get_knowledge_base,
    importance_multiplier,
)
from rag_pipeline.similarity import score

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS    = 3
DEFAULT_MIN_SIMILARITY = 0.05
QUICK_FACTS_LIMIT      = 5

URGENT_KEYWORDS = (
    "emergency", "urgent", "deadline", "registration", "exam", "appeal",
    "health", "medical", "probation", "withdrawal", "graduation",
)
_URGENT_MAX_RESULTS = 5


@dataclass(frozen=True)
class SearchResult:
    item: KnowledgeItem
    similarity: float
    relevance_score: float


class Retriever:
    """Search API over one injected, read-only KnowledgeBase."""

    def __init__(self, knowledge_base: KnowledgeBase) -> None:
        self.knowledge_base = knowledge_base

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def search(
        self,
        query: str,
        max_results: int = DEFAULT_MAX_RESULTS,
        min_similarity: float = DEFAULT_MIN_SIMILARITY,
    ) -> List[SearchResult]:
        """
        Return the most relevant knowledge items for ``query``.

        Parameters
        ----------
        query          : raw user text
        max_results    : upper bound on returned results
        min_similarity : raw-similarity floor an item must reach

        Returns
        -------
        List of SearchResult sorted by relevance_score, best first.
        """
        scored = self._score_items(query, self.knowledge_base)
        eligible = [r for r in scored if r.similarity >= min_similarity]
        results = _rank(eligible, max_results)

        logger.debug(
            "Knowledge search returned %d/%d items for %r.",
            len(results), len(self.knowledge_base), query,
        )
        return results

    def search_by_category(
        self,
        query: str,
        category: str,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> List[SearchResult]:
        """Search only items whose category contains ``category``; any positive similarity qualifies."""
        candidates = self.knowledge_base.filter_by_category(category)
        scored = self._score_items(query, candidates)
        eligible = [r for r in scored if r.similarity > 0]
        return _rank(eligible, max_results)

    def search_urgent(self, query: str) -> List[SearchResult]:
        """
        Search that favours policy-critical entries for time-sensitive queries.

        If the query mentions an urgent topic (deadline, exam, appeal, …) only
        high-importance items are returned, from a wider top-5 pool.
        Otherwise this is a plain default search.
        """
        if not is_urgent(query):
            return self.search(query)

        pool = self.search(query, _URGENT_MAX_RESULTS, DEFAULT_MIN_SIMILARITY)
        return [r for r in pool if r.item.importance == Importance.high]

    def quick_facts(self, limit: int = QUICK_FACTS_LIMIT) -> List[KnowledgeItem]:
        """First ``limit`` high-importance items, in knowledge-base order."""
        return [item for item in self.knowledge_base if item.importance == Importance.high][:limit]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _score_items(query: str, items: Iterable[KnowledgeItem]) -> List[SearchResult]:
        results = []
        for item in items:
            similarity = score(query, item)
            results.append(SearchResult(
                item            = item,
                similarity      = similarity,
                relevance_score = similarity * importance_multiplier(item.importance),
            ))
        return results


def is_urgent(query: str) -> bool:
    query_lower = query.lower()
    return any(keyword in query_lower for keyword in URGENT_KEYWORDS)


def _rank(results: List[SearchResult], max_results: int) -> List[SearchResult]:
    # sorted() is stable, so equal scores keep knowledge-base order
    ranked = sorted(results, key=lambda r: r.relevance_score, reverse=True)
    return ranked[:max(max_results, 0)]


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_retriever: Optional[Retriever] = None
_retriever_lock = Lock()


def get_retriever() -> Retriever:
    """Return a Retriever over the default knowledge base, built once."""
    global _default_retriever
    if _default_retriever is None:
        with _retriever_lock:
            if _default_retriever is None:
                _default_retriever = Retriever(get_knowledge_base())
    return _default_retriever


def reset_retriever() -> None:
    global _default_retriever
    with _retriever_lock:
        _default_retriever = None
