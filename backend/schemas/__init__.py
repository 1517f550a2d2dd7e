# backend/schemas/__init__.py
from backend.schemas.response import (
    SearchRequest,
    CategorySearchRequest,
    QueryRequest,
    ChatTurn,
    ChatRequest,
    KnowledgeItemOut,
    SearchResultOut,
    SearchResponse,
    QuickAnswerResponse,
    QuickFactsResponse,
    ChatResponse,
)

__all__ = [
    "SearchRequest", "CategorySearchRequest", "QueryRequest", "ChatTurn", "ChatRequest",
    "KnowledgeItemOut", "SearchResultOut", "SearchResponse", "QuickAnswerResponse",
    "QuickFactsResponse", "ChatResponse",
]
