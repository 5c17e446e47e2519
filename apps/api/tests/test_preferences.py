def test_genre_upsert_keeps_one_row(test_client, user_id):
    url = f"/api/users/{user_id}/genres"
    first = test_client.post(url, json={"genre": "Comedy", "rating": 2})
    second = test_client.post(url, json={"genre": "Comedy", "rating": 5})
    assert first.status_code == second.status_code == 201
    assert first.json()["id"] == second.json()["id"]

    genres = test_client.get(url).json()
    assert len(genres) == 1
    assert genres[0]["genre"] == "Comedy"
    assert genres[0]["rating"] == 5


def test_mood_upsert(test_client, user_id):
    url = f"/api/users/{user_id}/moods"
    test_client.post(url, json={"mood": "tense", "rating": 3})
    test_client.post(url, json={"mood": "cosy", "rating": 4})
    test_client.post(url, json={"mood": "tense", "rating": 1})

    moods = {m["mood"]: m["rating"] for m in test_client.get(url).json()}
    assert moods == {"tense": 1, "cosy": 4}


def test_rating_out_of_range_is_400(test_client, user_id):
    resp = test_client.post(
        f"/api/users/{user_id}/genres", json={"genre": "Comedy", "rating": 6}
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_blank_label_is_400(test_client, user_id):
    resp = test_client.post(
        f"/api/users/{user_id}/genres", json={"genre": "  ", "rating": 3}
    )
    assert resp.status_code == 400


def test_write_for_unknown_user_is_404(test_client):
    resp = test_client.post("/api/users/nobody/genres", json={"genre": "Comedy", "rating": 3})
    assert resp.status_code == 404


def test_actors_add_and_delete(test_client, user_id):
    url = f"/api/users/{user_id}/actors"
    a = test_client.post(url, json={"actorName": "Tilda Swinton"}).json()
    b = test_client.post(url, json={"actorName": "Bill Nighy", "rating": 3}).json()
    assert a["rating"] == 5

    assert [x["actorName"] for x in test_client.get(url).json()] == [
        "Tilda Swinton",
        "Bill Nighy",
    ]

    resp = test_client.delete(f"/api/actors/{a['id']}")
    assert resp.json() == {"success": True}
    assert [x["id"] for x in test_client.get(url).json()] == [b["id"]]

    again = test_client.delete(f"/api/actors/{a['id']}")
    assert again.status_code == 404


def test_directors_add_and_delete(test_client, user_id):
    url = f"/api/users/{user_id}/directors"
    d = test_client.post(url, json={"directorName": "Agnes Varda"}).json()
    assert d["directorName"] == "Agnes Varda"

    assert test_client.delete(f"/api/directors/{d['id']}").status_code == 200
    assert test_client.get(url).json() == []


def test_favourites(test_client, user_id):
    url = f"/api/users/{user_id}/favourites"
    fav = test_client.post(
        url,
        json={"title": "Detectorists", "mediaType": "tv", "year": 2014, "reason": "gentle"},
    )
    assert fav.status_code == 201
    assert fav.json()["mediaType"] == "tv"

    bad = test_client.post(url, json={"title": "Heat", "mediaType": "book"})
    assert bad.status_code == 400

    assert test_client.delete(f"/api/favourites/{fav.json()['id']}").json() == {
        "success": True
    }
    assert test_client.get(url).json() == []


def test_concurrent_genre_writes_leave_one_row(tmp_path):
    import asyncio

    from watchwise_store.db import get_engine, init_db, make_session_factory
    from watchwise_user.accounts.user_repo import SqlUserRepo
    from watchwise_user.preferences.preferences_repo import SqlPreferencesRepo
    from watchwise_user.preferences.preferences_service import PreferencesService
    from watchwise_user.preferences.schemas import RatedLabelSet

    engine = get_engine(f"sqlite:///{tmp_path / 'race.db'}")
    init_db(engine)
    sf = make_session_factory(engine)
    users = SqlUserRepo(sf)
    service = PreferencesService(SqlPreferencesRepo(sf), users)

    async def scenario():
        user = await users.create()
        writes = [
            service.set_genre(
                RatedLabelSet(user_id=user.id, label="Comedy", rating=1 + i % 5)
            )
            for i in range(20)
        ]
        results = await asyncio.gather(*writes)
        return user.id, results, await service.list_genres(user.id)

    try:
        uid, results, genres = asyncio.run(scenario())
    finally:
        engine.dispose()

    assert len(results) == 20
    assert len({r.id for r in results}) == 1
    assert len(genres) == 1
    assert genres[0].user_id == uid
    assert genres[0].rating in {1, 2, 3, 4, 5}
