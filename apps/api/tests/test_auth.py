def _register(client, email="a@x.com", password="secret1"):
    return client.post("/api/auth/register", json={"email": email, "password": password})


def test_register_then_login(test_client):
    reg = _register(test_client)
    assert reg.status_code == 201
    user = reg.json()
    assert user["email"] == "a@x.com"
    assert user["onboardingComplete"] is False
    assert "passwordHash" not in user and "password_hash" not in user

    resp = test_client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
    )
    assert resp.status_code == 200
    assert resp.json()["id"] == user["id"]


def test_login_wrong_password_and_unknown_email_look_the_same(test_client):
    _register(test_client)

    wrong = test_client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "nope-nope"}
    )
    unknown = test_client.post(
        "/api/auth/login", json={"email": "b@x.com", "password": "secret1"}
    )
    assert wrong.status_code == 401
    assert unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"error": "Invalid email or password"}


def test_register_twice_conflicts(test_client):
    assert _register(test_client).status_code == 201
    second = _register(test_client, email=" A@X.com ")
    assert second.status_code == 409
    assert "already registered" in second.json()["error"]


def test_register_validation(test_client):
    short = _register(test_client, password="12345")
    assert short.status_code == 400
    assert "at least 6" in short.json()["error"]

    missing = test_client.post("/api/auth/register", json={"email": "a@x.com"})
    assert missing.status_code == 400

    too_long = _register(test_client, password="x" * 73)
    assert too_long.status_code == 400


def test_me_follows_the_session(test_client):
    assert test_client.get("/api/auth/me").json() == {"user": None}

    user = _register(test_client).json()
    me = test_client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["user"]["id"] == user["id"]

    out = test_client.post("/api/auth/logout")
    assert out.json() == {"success": True}
    assert test_client.get("/api/auth/me").json() == {"user": None}


def test_anonymous_session(test_client):
    resp = test_client.post("/api/auth/anonymous")
    assert resp.status_code == 201
    user = resp.json()
    assert user["email"] is None
    assert test_client.get("/api/auth/me").json()["user"]["id"] == user["id"]


def test_link_upgrades_anonymous_user_in_place(test_client):
    anon = test_client.post("/api/auth/anonymous").json()
    test_client.post(
        f"/api/users/{anon['id']}/genres", json={"genre": "Comedy", "rating": 5}
    )

    resp = test_client.post(
        "/api/auth/link",
        json={"userId": anon["id"], "email": "a@x.com", "password": "secret1"},
    )
    assert resp.status_code == 200
    assert resp.json()["id"] == anon["id"]
    assert resp.json()["email"] == "a@x.com"

    genres = test_client.get(f"/api/users/{anon['id']}/genres").json()
    assert [g["genre"] for g in genres] == ["Comedy"]

    login = test_client.post(
        "/api/auth/login", json={"email": "a@x.com", "password": "secret1"}
    )
    assert login.json()["id"] == anon["id"]


def test_link_failures(test_client):
    _register(test_client)
    anon = test_client.post("/api/auth/anonymous").json()

    taken = test_client.post(
        "/api/auth/link",
        json={"userId": anon["id"], "email": "a@x.com", "password": "secret1"},
    )
    assert taken.status_code == 409

    missing_user = test_client.post(
        "/api/auth/link",
        json={"userId": "no-such-user", "email": "c@x.com", "password": "secret1"},
    )
    assert missing_user.status_code == 404

    incomplete = test_client.post("/api/auth/link", json={"email": "c@x.com"})
    assert incomplete.status_code == 400
