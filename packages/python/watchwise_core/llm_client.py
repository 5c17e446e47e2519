"""
Async wrapper around the OpenAI Chat Completions API.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from openai import AsyncOpenAI

from watchwise_core.config import CHAT_COMPLETION_MODEL


class ChatLLM(Protocol):
    async def chat(
        self,
        *,
        messages: list[dict[str, Any]],
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        extra_args: Optional[dict[str, Any]] = None,
    ) -> Any: ...


class LlmClient:
    """
    Thin wrapper around OpenAI's chat completion API.

    One request per call: the underlying client is built with retries
    disabled, and a ``timeout`` of None leaves the round trip unbounded.
    """

    def __init__(
        self,
        model: str = CHAT_COMPLETION_MODEL,
        timeout: float | None = None,
        api_key: str | None = None,
    ) -> None:
        client_kwargs: dict = {"timeout": timeout, "max_retries": 0}
        if api_key is not None:
            client_kwargs["api_key"] = api_key

        self._client = AsyncOpenAI(**client_kwargs)
        self._default_model = model

    async def chat(
        self,
        *,
        messages: list[dict[str, Any]],
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        extra_args: Optional[dict[str, Any]] = None,
    ):
        """
        Call the OpenAI chat completion endpoint.

        Returns the raw OpenAI response object; read
        ``resp.choices[0].message.content`` for the reply text.
        """
        kwargs: dict[str, Any] = dict(
            model=model or self._default_model,
            messages=messages,
            temperature=temperature,
        )

        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        if extra_args:
            kwargs.update(extra_args)

        resp = await self._client.chat.completions.create(**kwargs)
        return resp

    async def close(self) -> None:
        await self._client.close()


def first_message_content(resp: Any) -> str | None:
    """Pull the text of the first choice out of a chat completion response."""
    choices = getattr(resp, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    if message is None:
        return None
    return getattr(message, "content", None)
