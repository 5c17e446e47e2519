import json
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient


def completion(content: Optional[str]) -> SimpleNamespace:
    """Mimic the shape of an OpenAI chat completion response."""
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


def recommendations_reply(*titles: str) -> str:
    return json.dumps(
        {
            "recommendations": [
                {
                    "title": t,
                    "year": 2001,
                    "mediaType": "film",
                    "reason": f"Because {t}",
                    "imdbScore": 7.5,
                    "rottenTomatoesScore": 88,
                }
                for t in titles
            ]
        }
    )


class FakeLlm:
    """Scripted stand-in for LlmClient; records every call it receives."""

    def __init__(self) -> None:
        self.replies: List[Any] = []
        self.calls: List[Dict[str, Any]] = []

    def queue(self, *replies: Any) -> None:
        self.replies.extend(replies)

    async def chat(
        self,
        *,
        messages,
        model=None,
        temperature: float = 0.7,
        max_tokens=None,
        extra_args=None,
    ):
        self.calls.append(
            {
                "messages": messages,
                "model": model,
                "temperature": temperature,
                "extra_args": extra_args,
            }
        )
        if not self.replies:
            raise AssertionError("FakeLlm has no scripted reply left")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return completion(reply)

    async def close(self) -> None:
        return None


@pytest.fixture()
def fake_llm() -> FakeLlm:
    return FakeLlm()


@pytest.fixture()
def test_client(tmp_path, monkeypatch, fake_llm):
    # Ensure required env vars exist before the lifespan builds Settings
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("SESSION_SECRET", "test-session-secret")

    from app.main import app  # type: ignore
    from app.deps.deps_llm import get_chat_completion_llm  # type: ignore

    # Never reach the real completion endpoint
    app.dependency_overrides[get_chat_completion_llm] = lambda: fake_llm

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def user_id(test_client) -> str:
    resp = test_client.post("/api/users")
    assert resp.status_code == 201
    return resp.json()["id"]
