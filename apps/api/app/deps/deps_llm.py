from typing import Optional, cast

from fastapi import Depends, Request

from watchwise_core.llm_client import ChatLLM
from watchwise_recommendation.recommend import RecommendationClient

from app.deps.deps import get_settings


def get_chat_completion_llm(request: Request) -> Optional[ChatLLM]:
    """
    FastAPI dependency that returns the shared chat-completion client.

    None when no API key is configured; the recommendation client raises
    on first use, so user lookups still run first.
    """
    return cast(
        Optional[ChatLLM], getattr(request.app.state, "chat_completion_llm", None)
    )


def get_recommendation_client(
    llm: Optional[ChatLLM] = Depends(get_chat_completion_llm),
    settings=Depends(get_settings),
) -> RecommendationClient:
    return RecommendationClient(llm, model=settings.chat_model)
