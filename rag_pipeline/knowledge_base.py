"""
knowledge_base.py
=================
Read-only, in-memory university knowledge base.

Each KnowledgeItem is one static Q&A record.  A KnowledgeBase is built once
(from the bundled dataset or a JSON file named by KNOWLEDGE_BASE_PATH) and is
never mutated afterwards, so any number of concurrent searches may share it.

Records are validated here, at load time: an empty topic, category or answer
or an unknown importance level raises KnowledgeBaseError instead of surfacing
later as a silently bad search result.

JSON file format:

    [
      {
        "topic": "CGPA Calculation",
        "category": "Academic",
        "question": "How is CGPA calculated?",
        "answer": "CGPA is computed by ...",
        "keywords": ["cgpa", "gpa", "grade point"],
        "importance": "high"
      },
      ...
    ]
"""

from __future__ import annotations

import json
import logging
import os
from enum import Enum
from threading import Lock
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class KnowledgeBaseError(ValueError):
    """Raised when knowledge-base data is missing or malformed."""


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

class Importance(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


_IMPORTANCE_MULTIPLIERS: Dict[Importance, float] = {
    Importance.high:   1.3,
    Importance.medium: 1.1,
    Importance.low:    1.0,
}


def importance_multiplier(importance: Importance) -> float:
    """Ranking weight applied on top of raw similarity."""
    return _IMPORTANCE_MULTIPLIERS[Importance(importance)]


class KnowledgeItem(NamedTuple):
    topic: str
    category: str
    question: str
    answer: str
    keywords: Tuple[str, ...] = ()
    importance: Importance = Importance.medium


class KnowledgeRecord(BaseModel):
    """Validation schema for one knowledge entry read from external data."""

    topic: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    question: str = ""
    answer: str = Field(..., min_length=1)
    keywords: List[str] = Field(default_factory=list)
    importance: Importance = Importance.medium

    @field_validator("topic", "category", "answer")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def to_item(self) -> KnowledgeItem:
        return KnowledgeItem(
            topic      = self.topic,
            category   = self.category,
            question   = self.question,
            answer     = self.answer,
            keywords   = tuple(k for k in self.keywords if k),
            importance = self.importance,
        )


class KnowledgeBase:
    """Ordered, immutable collection of KnowledgeItems."""

    def __init__(self, items: Iterable[KnowledgeItem] = ()) -> None:
        self._items: Tuple[KnowledgeItem, ...] = tuple(items)

    def __iter__(self) -> Iterator[KnowledgeItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> KnowledgeItem:
        return self._items[index]

    @property
    def items(self) -> Tuple[KnowledgeItem, ...]:
        return self._items

    def categories(self) -> List[str]:
        """Distinct categories in first-seen order."""
        seen: List[str] = []
        for item in self._items:
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def filter_by_category(self, category: str) -> List[KnowledgeItem]:
        """Items whose category contains ``category`` (case-insensitive)."""
        needle = category.lower()
        return [item for item in self._items if needle in item.category.lower()]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def build_knowledge_base(records: Iterable[Dict]) -> KnowledgeBase:
    """
    Validate raw dict records and build a KnowledgeBase.

    Raises
    ------
    KnowledgeBaseError if any record fails validation; the message names the
    offending record index.
    """
    items: List[KnowledgeItem] = []
    for idx, record in enumerate(records):
        try:
            items.append(KnowledgeRecord.model_validate(record).to_item())
        except ValidationError as exc:
            raise KnowledgeBaseError(f"Invalid knowledge record #{idx}: {exc}") from exc
    return KnowledgeBase(items)


def load_knowledge_file(path: str) -> KnowledgeBase:
    """Load and validate a JSON knowledge-base file (a list of records)."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise KnowledgeBaseError(f"Cannot read knowledge base file {path}: {exc}") from exc

    if not isinstance(data, list):
        raise KnowledgeBaseError(
            f"Knowledge base file {path} must contain a JSON list of records."
        )

    kb = build_knowledge_base(data)
    logger.info("Loaded %d knowledge items from %s.", len(kb), path)
    return kb


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_kb: Optional[KnowledgeBase] = None
_kb_lock = Lock()


def _clean_env(name: str, default: str = "") -> str:
    value = os.getenv(name, default)
    return value.strip().strip('"').strip("'")


def get_knowledge_base() -> KnowledgeBase:
    """
    Return the process-wide knowledge base, building it on first use.

    KNOWLEDGE_BASE_PATH, when set, replaces the bundled university dataset.
    """
    global _default_kb
    if _default_kb is None:
        with _kb_lock:
            if _default_kb is None:
                path = _clean_env("KNOWLEDGE_BASE_PATH", "")
                if path:
                    _default_kb = load_knowledge_file(path)
                else:
                    from rag_pipeline.university_knowledge import UNIVERSITY_KNOWLEDGE
                    _default_kb = KnowledgeBase(UNIVERSITY_KNOWLEDGE)
                    logger.info("Knowledge base: bundled dataset (%d items)", len(_default_kb))
    return _default_kb


def reset_knowledge_base() -> None:
    """Drop the cached default so the next call reloads it."""
    global _default_kb
    with _kb_lock:
        _default_kb = None
