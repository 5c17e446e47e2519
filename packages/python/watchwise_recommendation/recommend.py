from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from watchwise_core.config import PARSE_REQUEST_TEMPERATURE, RECOMMENDATION_TEMPERATURE
from watchwise_core.errors import RecommendationError
from watchwise_core.llm_client import ChatLLM, first_message_content
from watchwise_core.types import RequestIntent, UserProfile
from watchwise_models.system_prompts import get_system_prompt
from watchwise_models.user_prompts import build_recommendation_prompt

from .schemas import ParsedRequest, Recommendation

log = logging.getLogger(__name__)

JSON_OBJECT = {"response_format": {"type": "json_object"}}


def _strip_fences(raw: str) -> str:
    text = raw.strip()
    # Strip markdown fences if present
    if text.startswith("```"):
        text = text.split("\n", 1)[-1].rsplit("```", 1)[0].strip()
    return text


def decode_recommendations(raw: str | None) -> list[Recommendation]:
    """
    Decode the recommendation reply body.

    Returns an empty list when the ``recommendations`` key is absent and skips
    individual items that do not validate. Raises RecommendationError for an
    empty, non-JSON or mis-shaped reply.
    """
    if not raw or not raw.strip():
        raise RecommendationError("No response from AI")
    text = _strip_fences(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        log.warning("Recommendation LLM returned non-JSON: %s", text[:200])
        raise RecommendationError("AI response was not valid JSON") from e

    if not isinstance(data, dict):
        raise RecommendationError("AI response was not a JSON object")

    items = data.get("recommendations") or []
    if not isinstance(items, list):
        raise RecommendationError("AI response 'recommendations' was not a list")

    recs: list[Recommendation] = []
    for it in items:
        try:
            recs.append(Recommendation.model_validate(it))
        except ValidationError as e:
            # Skip the item, keep the rest of the reply
            log.warning("Dropping malformed recommendation %r: %s", it, e.errors()[:1])
    return recs


def decode_parsed_request(raw: str | None) -> ParsedRequest:
    if not raw or not raw.strip():
        return ParsedRequest()
    text = _strip_fences(raw)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        log.warning("Parse-request LLM returned non-JSON: %s", text[:200])
        raise RecommendationError("AI response was not valid JSON") from e
    if not isinstance(data, dict):
        return ParsedRequest()

    try:
        intent = RequestIntent(data.get("intent"))
    except ValueError:
        intent = RequestIntent.UNKNOWN

    details_raw: Any = data.get("details") or {}
    details = (
        {str(k): str(v) for k, v in details_raw.items() if v is not None}
        if isinstance(details_raw, dict)
        else {}
    )
    return ParsedRequest(intent=intent, details=details)


class RecommendationClient:
    """
    Sends assembled prompts to the chat-completion endpoint and decodes the
    JSON replies. One call per request; errors propagate to the caller.
    """

    def __init__(self, llm: Optional[ChatLLM], *, model: str | None = None):
        self.llm = llm
        self.model = model

    def _require_llm(self) -> ChatLLM:
        if self.llm is None:
            raise RecommendationError("Chat completion llm not initialized")
        return self.llm

    async def generate(
        self, profile: UserProfile, user_request: Optional[str] = None
    ) -> list[Recommendation]:
        prompt = build_recommendation_prompt(profile, user_request)
        messages = [
            {"role": "system", "content": get_system_prompt("recommendation")},
            {"role": "user", "content": prompt},
        ]
        resp = await self._require_llm().chat(
            messages=messages,
            model=self.model,
            temperature=RECOMMENDATION_TEMPERATURE,
            extra_args=JSON_OBJECT,
        )
        return decode_recommendations(first_message_content(resp))

    async def parse_request(self, request: str) -> ParsedRequest:
        """Classify free text into an intent plus a few extracted details."""
        messages = [
            {"role": "system", "content": get_system_prompt("parse_request")},
            {"role": "user", "content": request},
        ]
        resp = await self._require_llm().chat(
            messages=messages,
            model=self.model,
            temperature=PARSE_REQUEST_TEMPERATURE,
            extra_args=JSON_OBJECT,
        )
        return decode_parsed_request(first_message_content(resp))
