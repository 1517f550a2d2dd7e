"""
llm_engine.py
=============
Groq chat completions for RAG-grounded CampusConnect AI replies.

Groq exposes an OpenAI-compatible API, so the standard ``openai`` client is
used with a Groq base URL:
  • base_url : https://api.groq.com/openai/v1   (GROQ_BASE_URL)
  • model    : llama-3.3-70b-versatile          (GROQ_MODEL)
  • api_key  : GROQ_API_KEY

The retrieved knowledge context is placed in the user turn ahead of the
student's question; previous turns are passed through unchanged.

Every failure is raised as LLMUnavailableError carrying a message that can be
shown to the student as is.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional, Sequence

from openai import APIConnectionError, APITimeoutError, OpenAI

logger = logging.getLogger(__name__)


class LLMUnavailableError(RuntimeError):
    """Raised when a reply is required but the remote LLM cannot provide one."""


_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
_DEFAULT_MODEL    = "llama-3.3-70b-versatile"
_REQUEST_TIMEOUT  = 30.0

SYSTEM_PROMPT = (
    "You are CampusConnect AI, a student helpdesk assistant for academic rules, "
    "registration dates, exam info, CGPA policies, and general university guidance. "
    "Always answer clearly and accurately based on Malaysian university practices."
)

_USER_PROMPT_TEMPLATE = """{context}

Student question: {message}"""


def _clean_env(name: str, default: str = "") -> str:
    value = os.getenv(name, default)
    return value.strip().strip('"').strip("'")


def is_configured() -> bool:
    api_key = _clean_env("GROQ_API_KEY", "")
    return bool(api_key) and not api_key.startswith("your_")


def model_name() -> str:
    return _clean_env("GROQ_MODEL", _DEFAULT_MODEL) or _DEFAULT_MODEL


def _build_client() -> OpenAI:
    return OpenAI(
        base_url = _clean_env("GROQ_BASE_URL", _DEFAULT_BASE_URL) or _DEFAULT_BASE_URL,
        api_key  = _clean_env("GROQ_API_KEY", ""),
        timeout  = _REQUEST_TIMEOUT,
    )


# ---------------------------------------------------------------------------
# Prompt assembly
# ---------------------------------------------------------------------------

def build_messages(
    message: str,
    history: Optional[Sequence[Dict[str, str]]] = None,
    context: Optional[str] = None,
) -> List[Dict[str, str]]:
    """System prompt, prior turns, then the (context-augmented) user turn."""
    user_content = message
    if context:
        user_content = _USER_PROMPT_TEMPLATE.format(context=context, message=message)

    messages: List[Dict[str, str]] = [{"role": "system", "content": SYSTEM_PROMPT}]
    for turn in history or []:
        messages.append({"role": turn["role"], "content": turn["content"]})
    messages.append({"role": "user", "content": user_content})
    return messages


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_reply(
    message: str,
    history: Optional[Sequence[Dict[str, str]]] = None,
    context: Optional[str] = None,
    max_tokens: int = 1024,
) -> str:
    """
    Ask the Groq model for a reply to ``message``.

    Parameters
    ----------
    message    : the student's latest message
    history    : previous turns as {"role": "user"|"assistant", "content": str}
    context    : knowledge block from context_formatter.format_context()
    max_tokens : completion budget

    Returns
    -------
    The model's reply, stripped.

    Raises
    ------
    LLMUnavailableError on missing configuration or any request failure.
    """
    if not is_configured():
        raise LLMUnavailableError(
            "Groq API key not found. Please add GROQ_API_KEY to your .env file."
        )

    messages = build_messages(message, history, context)
    model = model_name()

    try:
        completion = _build_client().chat.completions.create(
            model=model,
            messages=messages,
            temperature=0.7,
            max_tokens=max_tokens,
            top_p=1,
            stream=False,
        )
    except Exception as exc:
        logger.error("Groq API error: %s", exc)
        raise LLMUnavailableError(_describe_error(exc)) from exc

    choices = getattr(completion, "choices", None) or []
    reply = choices[0].message.content if choices and choices[0].message else None
    if not reply or not reply.strip():
        logger.warning("Groq model %s returned an empty response.", model)
        raise LLMUnavailableError("No response from AI. Please try again.")

    usage = getattr(completion, "usage", None)
    if usage is not None:
        logger.info(
            "Groq API success (%s): prompt=%s completion=%s total=%s tokens",
            model,
            getattr(usage, "prompt_tokens", "?"),
            getattr(usage, "completion_tokens", "?"),
            getattr(usage, "total_tokens", "?"),
        )

    return reply.strip()


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

def _status_code(exc: Exception) -> Optional[int]:
    status_code = getattr(exc, "status_code", None)
    if status_code is not None:
        return status_code

    response = getattr(exc, "response", None)
    if response is not None:
        return getattr(response, "status_code", None)
    return None


def _describe_error(exc: Exception) -> str:
    """Translate a client exception into a student-facing message."""
    if isinstance(exc, APITimeoutError):
        return "Request timeout. Please check your connection and try again."

    status_code = _status_code(exc)
    if status_code == 400:
        body = getattr(exc, "body", None)
        detail = body.get("message") if isinstance(body, dict) else None
        return f"Bad request: {detail or 'Invalid request'}"
    if status_code in (401, 403):
        return "Invalid API key. Please check your Groq API credentials."
    if status_code == 429:
        return "Rate limit exceeded. Please try again in a moment."
    if status_code is not None and status_code >= 500:
        return "Groq service error. Please try again later."
    if isinstance(exc, APIConnectionError):
        return "Could not reach the AI service. Please check your connection and try again."

    return "Failed to get response from AI. Please try again."
