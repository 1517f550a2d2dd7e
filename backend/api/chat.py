"""
api/chat.py
===========
POST /api/chat
--------------
Accepts a JSON body with:
  • message : the student's latest message
  • history : previous turns [{role: "user"|"assistant", content: str}]

Pipeline:

  1. Retrieve knowledge for the message (retriever.search)
  2. Render the prompt context block (context_formatter.render_context)
  3. Ask the Groq model (llm_engine.generate_reply) — offloaded to a thread
  4. On LLMUnavailableError, answer from the knowledge base under a neutral
     lead-in (context_formatter.format_quick_answer) and flag
     llm_call_success=false
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends

from backend.schemas.response import ChatRequest, ChatResponse
from rag_pipeline import llm_engine
from rag_pipeline.context_formatter import format_quick_answer, render_context
from rag_pipeline.llm_engine import LLMUnavailableError
from rag_pipeline.retriever import Retriever, get_retriever

logger = logging.getLogger(__name__)

router = APIRouter()

LLM_FALLBACK_LEAD = (
    "The AI assistant is not available right now, so here is what the "
    "university knowledge base says:"
)


@router.post("/api/chat", response_model=ChatResponse)
async def chat(req: ChatRequest, retriever: Retriever = Depends(get_retriever)):
    """Reply to a student message with a RAG-grounded LLM answer."""

    # ── 1 & 2. Retrieval + context ─────────────────────────────────────────
    results = retriever.search(req.message)
    context = render_context(results)
    history = [turn.model_dump() for turn in req.history]

    # ── 3. LLM ─────────────────────────────────────────────────────────────
    try:
        reply = await asyncio.to_thread(
            llm_engine.generate_reply, req.message, history, context
        )
    except LLMUnavailableError as exc:
        # ── 4. Knowledge-base fallback ─────────────────────────────────────
        # The error text can name server configuration; it goes to the log only.
        logger.warning("LLM unavailable (%s) — replying from knowledge base.", exc)
        return ChatResponse(
            reply            = f"{LLM_FALLBACK_LEAD}\n\n{format_quick_answer(retriever, req.message)}",
            model_used       = None,
            rag_items_used   = len(results),
            llm_call_success = False,
        )

    return ChatResponse(
        reply            = reply,
        model_used       = llm_engine.model_name(),
        rag_items_used   = len(results),
        llm_call_success = True,
    )
