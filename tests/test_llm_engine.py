from types import SimpleNamespace

import httpx
import pytest
from openai import APITimeoutError

from rag_pipeline import llm_engine
from rag_pipeline.llm_engine import LLMUnavailableError, build_messages, generate_reply


class _FakeCompletions:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.reply))],
            usage=SimpleNamespace(prompt_tokens=120, completion_tokens=40, total_tokens=160),
        )


class _StatusError(Exception):
    def __init__(self, status_code, body=None):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


@pytest.fixture
def fake_client(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk_test")
    monkeypatch.delenv("GROQ_MODEL", raising=False)
    completions = _FakeCompletions(reply="  Your CGPA is the credit-weighted average.  ")
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(llm_engine, "_build_client", lambda: client)
    return completions


def test_build_messages_places_context_before_question():
    history = [
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "Hello!"},
    ]
    messages = build_messages("How is CGPA calculated?", history, "CONTEXT BLOCK")

    assert messages[0] == {"role": "system", "content": llm_engine.SYSTEM_PROMPT}
    assert messages[1:3] == history
    assert messages[-1] == {
        "role": "user",
        "content": "CONTEXT BLOCK\n\nStudent question: How is CGPA calculated?",
    }


def test_build_messages_without_context():
    assert build_messages("hello")[-1] == {"role": "user", "content": "hello"}
    assert len(build_messages("hello")) == 2


def test_generate_reply_sends_groq_request(fake_client):
    reply = generate_reply("How is CGPA calculated?", context="CONTEXT")

    assert reply == "Your CGPA is the credit-weighted average."
    call = fake_client.calls[0]
    assert call["model"] == "llama-3.3-70b-versatile"
    assert call["temperature"] == 0.7
    assert call["max_tokens"] == 1024
    assert call["top_p"] == 1
    assert call["stream"] is False
    assert call["messages"][-1]["content"].startswith("CONTEXT")


def test_generate_reply_honours_model_override(fake_client, monkeypatch):
    monkeypatch.setenv("GROQ_MODEL", "llama-3.1-8b-instant")
    generate_reply("hello")
    assert fake_client.calls[0]["model"] == "llama-3.1-8b-instant"


def test_generate_reply_passes_max_tokens(fake_client):
    generate_reply("hello", max_tokens=256)
    assert fake_client.calls[0]["max_tokens"] == 256


@pytest.mark.parametrize("key", [None, "", "your_groq_api_key"])
def test_generate_reply_requires_api_key(monkeypatch, key):
    if key is None:
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
    else:
        monkeypatch.setenv("GROQ_API_KEY", key)

    assert not llm_engine.is_configured()
    with pytest.raises(LLMUnavailableError, match="API key not found"):
        generate_reply("hello")


def test_empty_reply_is_an_error(fake_client):
    fake_client.reply = "   "
    with pytest.raises(LLMUnavailableError, match="No response"):
        generate_reply("hello")


@pytest.mark.parametrize(
    "status_code, message",
    [
        (400, "Bad request: context too long"),
        (401, "Invalid API key"),
        (429, "Rate limit exceeded"),
        (500, "Groq service error"),
        (503, "Groq service error"),
        (418, "Failed to get response from AI"),
    ],
)
def test_request_errors_are_translated(fake_client, status_code, message):
    fake_client.error = _StatusError(status_code, body={"message": "context too long"})

    with pytest.raises(LLMUnavailableError, match=message) as excinfo:
        generate_reply("hello")
    assert isinstance(excinfo.value.__cause__, _StatusError)


def test_timeout_is_translated(fake_client):
    fake_client.error = APITimeoutError(request=httpx.Request("POST", "https://api.groq.com/openai/v1"))
    with pytest.raises(LLMUnavailableError, match="Request timeout"):
        generate_reply("hello")
