"""
context_formatter.py
====================
Render retrieval results as text.

  format_context()      — context block prepended to the LLM user turn
  format_quick_answer() — direct answer for the quick-search feature (no LLM)

render_context() / render_quick_answer() take results the caller has already
searched for, so a route that also reports result counts searches only once.

Quick answers use a stricter similarity floor (0.2 vs 0.05) because no model
sits between a weak match and the student.
"""

from __future__ import annotations

from typing import List, Sequence

from rag_pipeline.retriever import Retriever, SearchResult

QUICK_ANSWER_MIN_SIMILARITY = 0.2
QUICK_ANSWER_MAX_RESULTS    = 3

NO_CONTEXT_FALLBACK = (
    "No specific university policies found for this query. "
    "Provide general guidance based on common Malaysian university practices."
)

_CONTEXT_HEADER = "Based on the following university information:"
_CONTEXT_CLOSING = (
    "Please provide a comprehensive answer based on the above information, "
    "and mention that specific details may vary by institution or individual circumstances."
)

NO_RESULTS_MESSAGE = "No relevant information found."
_RESULTS_HEADER = "Here's what I found:"
_QUICK_ANSWER_DISCLAIMER = (
    "Note: This is general guidance. Please verify the details with your "
    "institution's academic office, as policies vary between universities."
)


def format_context(retriever: Retriever, query: str) -> str:
    """Build the knowledge block injected into the outgoing LLM prompt."""
    return render_context(retriever.search(query))


def render_context(results: Sequence[SearchResult]) -> str:
    """Context block for already-ranked results (default search thresholds)."""
    if not results:
        return NO_CONTEXT_FALLBACK

    blocks: List[str] = [_CONTEXT_HEADER]
    for idx, result in enumerate(results, start=1):
        item = result.item
        blocks.append(
            f"{idx}. **{item.topic}** ({item.category}):\n"
            f"   Q: {item.question}\n"
            f"   A: {item.answer}"
        )
    blocks.append(_CONTEXT_CLOSING)
    return "\n\n".join(blocks)


def format_search_results(results: Sequence[SearchResult]) -> str:
    """Numbered topic/answer list for display to the student."""
    if not results:
        return NO_RESULTS_MESSAGE

    lines = [_RESULTS_HEADER]
    for idx, result in enumerate(results, start=1):
        lines.append(f"{idx}. **{result.item.topic}**\n{result.item.answer}")
    return "\n\n".join(lines)


def search_quick_answer(retriever: Retriever, query: str) -> List[SearchResult]:
    return retriever.search(
        query,
        max_results    = QUICK_ANSWER_MAX_RESULTS,
        min_similarity = QUICK_ANSWER_MIN_SIMILARITY,
    )


def format_quick_answer(retriever: Retriever, query: str) -> str:
    """Answer ``query`` directly from the knowledge base, or suggest what to ask about."""
    return render_quick_answer(
        search_quick_answer(retriever, query),
        retriever.knowledge_base.categories(),
    )


def render_quick_answer(results: Sequence[SearchResult], categories: Sequence[str]) -> str:
    if not results:
        return no_information_message(categories)

    return f"{format_search_results(results)}\n\n{_QUICK_ANSWER_DISCLAIMER}"


def no_information_message(categories: Sequence[str]) -> str:
    if not categories:
        return "I couldn't find specific information about that in the university knowledge base."
    if len(categories) == 1:
        topics = categories[0]
    else:
        topics = ", ".join(categories[:-1]) + f" or {categories[-1]}"
    return (
        "I couldn't find specific information about that. "
        f"Try asking about {topics}."
    )
