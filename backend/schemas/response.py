"""
schemas/response.py
===================
Pydantic v2 request and response models for the CampusConnect knowledge API.

All request fields are validated before a handler runs, so the retrieval
core only ever receives well-typed arguments.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from rag_pipeline.knowledge_base import Importance, KnowledgeItem
from rag_pipeline.retriever import SearchResult


def _utc_now() -> str:
    return datetime.now(UTC).isoformat(timespec="seconds").replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class SearchRequest(BaseModel):
    query: str
    max_results: int = Field(3, ge=0, le=50)
    min_similarity: float = Field(0.05, ge=0.0, le=1.0)


class CategorySearchRequest(BaseModel):
    query: str
    category: str = Field(..., min_length=1)
    max_results: int = Field(3, ge=0, le=50)


class QueryRequest(BaseModel):
    query: str


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    history: List[ChatTurn] = Field(default_factory=list)

    @field_validator("message")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("message must not be blank")
        return v


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------

class KnowledgeItemOut(BaseModel):
    topic: str
    category: str
    question: str
    answer: str
    keywords: List[str] = Field(default_factory=list)
    importance: Importance

    @classmethod
    def from_item(cls, item: KnowledgeItem) -> "KnowledgeItemOut":
        return cls(
            topic      = item.topic,
            category   = item.category,
            question   = item.question,
            answer     = item.answer,
            keywords   = list(item.keywords),
            importance = item.importance,
        )


class SearchResultOut(BaseModel):
    item: KnowledgeItemOut
    similarity: float
    relevance_score: float

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultOut":
        return cls(
            item            = KnowledgeItemOut.from_item(result.item),
            similarity      = round(result.similarity, 4),
            relevance_score = round(result.relevance_score, 4),
        )


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class SearchResponse(BaseModel):
    query: str
    results: List[SearchResultOut] = Field(default_factory=list)
    timestamp: str = Field(default_factory=_utc_now)

    @classmethod
    def build(cls, query: str, results: List[SearchResult]) -> "SearchResponse":
        return cls(query=query, results=[SearchResultOut.from_result(r) for r in results])


class QuickAnswerResponse(BaseModel):
    query: str
    answer: str
    results_found: int


class QuickFactsResponse(BaseModel):
    facts: List[KnowledgeItemOut] = Field(default_factory=list)


class ChatResponse(BaseModel):
    reply: str
    model_used: Optional[str] = None
    rag_items_used: int = 0
    llm_call_success: bool
    timestamp: str = Field(default_factory=_utc_now)
