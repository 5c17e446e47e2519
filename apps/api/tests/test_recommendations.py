import json

from conftest import recommendations_reply


def _love_two_genres(client, user_id):
    for genre in ("Comedy", "Drama"):
        client.post(f"/api/users/{user_id}/genres", json={"genre": genre, "rating": 5})


def test_request_is_logged_per_recommendation(test_client, fake_llm, user_id):
    _love_two_genres(test_client, user_id)
    fake_llm.queue(recommendations_reply("Airplane!", "Hot Fuzz", "Paddington 2"))

    resp = test_client.post(
        f"/api/users/{user_id}/recommendations", json={"request": "something funny"}
    )
    assert resp.status_code == 200
    recs = resp.json()
    assert [r["title"] for r in recs] == ["Airplane!", "Hot Fuzz", "Paddington 2"]
    assert recs[0]["mediaType"] == "film"
    assert recs[0]["imdbScore"] == 7.5
    assert recs[0]["rottenTomatoesScore"] == 88

    log = test_client.get(f"/api/users/{user_id}/recommendation-log").json()
    assert len(log) == len(recs)
    assert {row["prompt"] for row in log} == {"something funny"}
    assert {row["title"] for row in log} == {r["title"] for r in recs}
    assert all(row["outcome"] is None for row in log)

    prompt = fake_llm.calls[0]["messages"][1]["content"]
    assert 'USER REQUEST: "something funny"' in prompt
    assert "FAVOURITE GENRES: Comedy, Drama" in prompt


def test_profile_based_without_body(test_client, fake_llm, user_id):
    fake_llm.queue(recommendations_reply("Heat"))

    resp = test_client.post(f"/api/users/{user_id}/recommendations")
    assert resp.status_code == 200

    log = test_client.get(f"/api/users/{user_id}/recommendation-log").json()
    assert [row["prompt"] for row in log] == ["profile-based"]


def test_empty_recommendations_key_logs_nothing(test_client, fake_llm, user_id):
    fake_llm.queue(json.dumps({}))

    resp = test_client.post(f"/api/users/{user_id}/recommendations", json={})
    assert resp.status_code == 200
    assert resp.json() == []
    assert test_client.get(f"/api/users/{user_id}/recommendation-log").json() == []


def test_llm_failure_is_500_and_not_retried(test_client, fake_llm, user_id):
    fake_llm.queue(RuntimeError("upstream down"))

    resp = test_client.post(f"/api/users/{user_id}/recommendations", json={})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate recommendations"}
    assert len(fake_llm.calls) == 1
    assert test_client.get(f"/api/users/{user_id}/recommendation-log").json() == []


def test_unparseable_reply_is_500(test_client, fake_llm, user_id):
    fake_llm.queue("definitely not json")

    resp = test_client.post(f"/api/users/{user_id}/recommendations", json={})
    assert resp.status_code == 500


def test_unknown_user_is_404(test_client, fake_llm):
    resp = test_client.post("/api/users/nobody/recommendations", json={})
    assert resp.status_code == 404
    assert fake_llm.calls == []


def test_outcome_update(test_client, fake_llm, user_id):
    fake_llm.queue(recommendations_reply("Heat"))
    test_client.post(f"/api/users/{user_id}/recommendations", json={})
    entry = test_client.get(f"/api/users/{user_id}/recommendation-log").json()[0]

    url = f"/api/recommendation-log/{entry['id']}/outcome"
    assert test_client.patch(url, json={"outcome": "added_to_watchlist"}).json() == {
        "success": True
    }
    # No transition order is enforced
    assert test_client.patch(url, json={"outcome": "watched"}).status_code == 200

    entry = test_client.get(f"/api/users/{user_id}/recommendation-log").json()[0]
    assert entry["outcome"] == "watched"

    assert test_client.patch(url, json={"outcome": "loved_it"}).status_code == 400
    missing = test_client.patch(
        "/api/recommendation-log/nope/outcome", json={"outcome": "rejected"}
    )
    assert missing.status_code == 404


def test_parse_request(test_client, fake_llm):
    fake_llm.queue(json.dumps({"intent": "add_favourite", "details": {"title": "Heat"}}))

    resp = test_client.post("/api/parse-request", json={"request": "I loved Heat"})
    assert resp.status_code == 200
    assert resp.json() == {"intent": "add_favourite", "details": {"title": "Heat"}}


def test_parse_request_failure(test_client, fake_llm):
    fake_llm.queue(RuntimeError("boom"))

    resp = test_client.post("/api/parse-request", json={"request": "anything"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to parse request"}


def test_parse_request_requires_text(test_client):
    assert test_client.post("/api/parse-request", json={}).status_code == 400


def test_media_type_casing_is_tolerated(test_client, fake_llm, user_id):
    fake_llm.queue(
        json.dumps(
            {
                "recommendations": [
                    {"title": "Heat", "mediaType": "film"},
                    {"title": "Slow Horses", "mediaType": "TV"},
                    {"title": "Dune", "mediaType": "book"},
                ]
            }
        )
    )

    resp = test_client.post(f"/api/users/{user_id}/recommendations", json={})
    assert resp.status_code == 200
    assert [(r["title"], r["mediaType"]) for r in resp.json()] == [
        ("Heat", "film"),
        ("Slow Horses", "tv"),
    ]

    log = test_client.get(f"/api/users/{user_id}/recommendation-log").json()
    assert sorted(row["title"] for row in log) == ["Heat", "Slow Horses"]


def test_logged_prompt_matches_request_sent(test_client, fake_llm, user_id):
    fake_llm.queue(recommendations_reply("Airplane!"))

    test_client.post(
        f"/api/users/{user_id}/recommendations", json={"request": "  funny "}
    )

    sent = fake_llm.calls[0]["messages"][1]["content"]
    assert sent == 'USER REQUEST: "  funny "'
    log = test_client.get(f"/api/users/{user_id}/recommendation-log").json()
    assert [row["prompt"] for row in log] == ["  funny "]


def test_without_llm_unknown_user_is_still_404(test_client, user_id):
    from app.deps.deps_llm import get_chat_completion_llm  # type: ignore

    test_client.app.dependency_overrides[get_chat_completion_llm] = lambda: None

    missing = test_client.post("/api/users/nobody/recommendations", json={})
    assert missing.status_code == 404

    known = test_client.post(f"/api/users/{user_id}/recommendations", json={})
    assert known.status_code == 500
    assert known.json() == {"error": "Failed to generate recommendations"}
