"""
api/health.py
=============
GET /api/health — liveness and readiness probe for the CampusConnect backend.
"""

from fastapi import APIRouter, Depends

from rag_pipeline.llm_engine import is_configured
from rag_pipeline.retriever import Retriever, get_retriever

router = APIRouter()


@router.get("/api/health")
async def health_check(retriever: Retriever = Depends(get_retriever)):
    """Return service status and component readiness flags."""
    kb = retriever.knowledge_base
    return {
        "status":               "ok",
        "knowledge_items":      len(kb),
        "knowledge_categories": kb.categories(),
        "llm_configured":       is_configured(),
        "api_version":          "1.0.0",
    }
