import asyncio
import json

import pytest

from watchwise_core.errors import RecommendationError
from watchwise_core.types import MediaType, RatedLabel, RequestIntent, UserProfile
from watchwise_recommendation.recommend import (
    RecommendationClient,
    decode_parsed_request,
    decode_recommendations,
)

from conftest import FakeLlm, recommendations_reply


def test_decode_recommendations_reads_camel_case_items():
    recs = decode_recommendations(recommendations_reply("Heat", "Ronin"))

    assert [r.title for r in recs] == ["Heat", "Ronin"]
    assert recs[0].media_type is MediaType.FILM
    assert recs[0].imdb_score == 7.5
    assert recs[0].rotten_tomatoes_score == 88


def test_decode_recommendations_missing_key_is_empty():
    assert decode_recommendations(json.dumps({"something": "else"})) == []


def test_decode_recommendations_strips_markdown_fences():
    raw = "```json\n" + recommendations_reply("Heat") + "\n```"
    assert [r.title for r in decode_recommendations(raw)] == ["Heat"]


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_decode_recommendations_empty_reply(raw):
    with pytest.raises(RecommendationError, match="No response from AI"):
        decode_recommendations(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        json.dumps(["a", "list"]),
        json.dumps({"recommendations": "Heat"}),
    ],
)
def test_decode_recommendations_rejects_bad_shapes(raw):
    with pytest.raises(RecommendationError):
        decode_recommendations(raw)


def test_decode_recommendations_normalizes_media_type():
    raw = json.dumps(
        {
            "recommendations": [
                {"title": "Heat", "mediaType": "film"},
                {"title": "Slow Horses", "mediaType": " TV "},
            ]
        }
    )
    recs = decode_recommendations(raw)

    assert [r.title for r in recs] == ["Heat", "Slow Horses"]
    assert recs[1].media_type is MediaType.TV


def test_decode_recommendations_drops_invalid_items():
    raw = json.dumps(
        {
            "recommendations": [
                {"title": "Heat", "mediaType": "film"},
                {"title": "Dune", "mediaType": "book"},
                {"mediaType": "tv"},
                "not an object",
            ]
        }
    )
    assert [r.title for r in decode_recommendations(raw)] == ["Heat"]


def test_decode_parsed_request():
    parsed = decode_parsed_request(
        json.dumps({"intent": "add_favourite", "details": {"title": "Heat", "year": None}})
    )
    assert parsed.intent is RequestIntent.ADD_FAVOURITE
    assert parsed.details == {"title": "Heat"}


def test_decode_parsed_request_coerces_unknown_intent():
    parsed = decode_parsed_request(json.dumps({"intent": "order_pizza"}))
    assert parsed.intent is RequestIntent.UNKNOWN
    assert parsed.details == {}


def test_decode_parsed_request_empty_reply():
    parsed = decode_parsed_request("")
    assert parsed.intent is RequestIntent.UNKNOWN


def test_generate_sends_prompt_and_json_mode():
    llm = FakeLlm()
    llm.queue(recommendations_reply("Heat"))
    client = RecommendationClient(llm, model="gpt-test")
    profile = UserProfile(genres=[RatedLabel("Crime", 5)])

    recs = asyncio.run(client.generate(profile, "something tense"))

    assert [r.title for r in recs] == ["Heat"]
    call = llm.calls[0]
    assert call["model"] == "gpt-test"
    assert call["temperature"] == 0.8
    assert call["extra_args"] == {"response_format": {"type": "json_object"}}
    assert call["messages"][0]["role"] == "system"
    user_msg = call["messages"][1]["content"]
    assert 'USER REQUEST: "something tense"' in user_msg
    assert "FAVOURITE GENRES: Crime" in user_msg


def test_generate_propagates_llm_errors():
    llm = FakeLlm()
    llm.queue(RuntimeError("upstream down"))
    client = RecommendationClient(llm)

    with pytest.raises(RuntimeError):
        asyncio.run(client.generate(UserProfile()))
    assert len(llm.calls) == 1


def test_missing_llm_fails_only_when_called():
    client = RecommendationClient(None)

    with pytest.raises(RecommendationError, match="not initialized"):
        asyncio.run(client.generate(UserProfile()))


def test_parse_request_uses_low_temperature():
    llm = FakeLlm()
    llm.queue(json.dumps({"intent": "recommendation", "details": {"genre": "comedy"}}))
    client = RecommendationClient(llm)

    parsed = asyncio.run(client.parse_request("something funny"))

    assert parsed.intent is RequestIntent.RECOMMENDATION
    assert parsed.details == {"genre": "comedy"}
    assert llm.calls[0]["temperature"] == 0.3
    assert llm.calls[0]["messages"][1]["content"] == "something funny"
