"""
main.py
=======
FastAPI application entry point for the CampusConnect knowledge service.

Run locally:
  uvicorn backend.main:app --reload --port 8000

The lifespan handler builds the knowledge base and retriever once at startup
so a malformed KNOWLEDGE_BASE_PATH file fails the boot instead of the first
request.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv  # type: ignore
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (one level above this file's package)
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

from backend.api.chat import router as chat_router  # noqa: E402
from backend.api.health import router as health_router  # noqa: E402
from backend.api.search import router as search_router  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan: startup / shutdown
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise singletons before first request."""
    logger.info("CampusConnect backend starting up…")

    from rag_pipeline.llm_engine import is_configured
    from rag_pipeline.retriever import get_retriever

    retriever = get_retriever()
    logger.info(
        "Knowledge base ready: %d items in %d categories.",
        len(retriever.knowledge_base), len(retriever.knowledge_base.categories()),
    )
    if not is_configured():
        logger.warning("GROQ_API_KEY not set — chat replies will come from the knowledge base only.")

    logger.info("All components initialised. Ready.")
    yield

    logger.info("CampusConnect backend shutting down.")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> FastAPI:
    app = FastAPI(
        title       = "CampusConnect API",
        description = (
            "University helpdesk knowledge service — lexical retrieval over a "
            "curated knowledge base, quick answers, and RAG-grounded Groq LLM chat."
        ),
        version     = "1.0.0",
        docs_url    = "/docs",
        redoc_url   = "/redoc",
        lifespan    = lifespan,
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    origins = [
        "http://localhost:8081",
        "http://127.0.0.1:8081",
        os.getenv("FRONTEND_URL", "http://localhost:19006"),
    ]
    app.add_middleware(
        CORSMiddleware,
        allow_origins     = origins,
        allow_credentials = True,
        allow_methods     = ["*"],
        allow_headers     = ["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────
    app.include_router(health_router)
    app.include_router(search_router)
    app.include_router(chat_router)

    return app


app = create_app()
