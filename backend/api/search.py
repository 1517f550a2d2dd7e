"""
api/search.py
=============
Knowledge search endpoints.

  POST /api/search           — ranked search with tunable limits
  POST /api/search/category  — search restricted to one category
  POST /api/search/urgent    — high-importance results for urgent topics
  POST /api/quick-answer     — direct answer text, no LLM involved
  GET  /api/quick-facts      — the top high-importance entries

All handlers are plain ``def``: the retrieval core is synchronous and CPU
bound in the sub-millisecond range, so FastAPI's thread pool is enough.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from backend.schemas.response import (
    CategorySearchRequest,
    KnowledgeItemOut,
    QueryRequest,
    QuickAnswerResponse,
    QuickFactsResponse,
    SearchRequest,
    SearchResponse,
)
from rag_pipeline.context_formatter import render_quick_answer, search_quick_answer
from rag_pipeline.retriever import Retriever, get_retriever

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/search", response_model=SearchResponse)
def search(req: SearchRequest, retriever: Retriever = Depends(get_retriever)):
    results = retriever.search(req.query, req.max_results, req.min_similarity)
    return SearchResponse.build(req.query, results)


@router.post("/api/search/category", response_model=SearchResponse)
def search_by_category(req: CategorySearchRequest, retriever: Retriever = Depends(get_retriever)):
    results = retriever.search_by_category(req.query, req.category, req.max_results)
    return SearchResponse.build(req.query, results)


@router.post("/api/search/urgent", response_model=SearchResponse)
def search_urgent(req: QueryRequest, retriever: Retriever = Depends(get_retriever)):
    results = retriever.search_urgent(req.query)
    return SearchResponse.build(req.query, results)


@router.post("/api/quick-answer", response_model=QuickAnswerResponse)
def quick_answer(req: QueryRequest, retriever: Retriever = Depends(get_retriever)):
    """Answer straight from the knowledge base using the stricter quick-answer threshold."""
    results = search_quick_answer(retriever, req.query)
    logger.info("Quick answer for %r: %d items.", req.query, len(results))
    return QuickAnswerResponse(
        query         = req.query,
        answer        = render_quick_answer(results, retriever.knowledge_base.categories()),
        results_found = len(results),
    )


@router.get("/api/quick-facts", response_model=QuickFactsResponse)
def quick_facts(retriever: Retriever = Depends(get_retriever)):
    return QuickFactsResponse(
        facts=[KnowledgeItemOut.from_item(item) for item in retriever.quick_facts()]
    )
