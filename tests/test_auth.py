"""Tests for registration and login endpoints."""

from tests.conftest import VALID_CAPTCHA, create_user


def registration(**overrides):
    payload = {
        "username": "ada",
        "email": "ada@example.com",
        "password": "secret1",
        "name": "Ada Lovelace",
        "captchaToken": VALID_CAPTCHA,
    }
    payload.update(overrides)
    return payload


async def test_register_creates_member(client):
    response = await client.post("/auth/register", json=registration())

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["user"]["username"] == "ada"
    assert body["user"]["role"] == "MEMBER"
    assert "passwordHash" not in body["user"]
    assert "password" not in body["user"]


async def test_register_rejects_duplicate_username(client, db):
    await create_user(db, "ada", email="other@example.com")

    response = await client.post("/auth/register", json=registration())

    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Username or email already exists"


async def test_register_rejects_duplicate_email(client, db):
    await create_user(db, "someone", email="ada@example.com")

    response = await client.post("/auth/register", json=registration())

    assert response.status_code == 409


async def test_register_rejects_bad_captcha(client):
    response = await client.post("/auth/register", json=registration(captchaToken="forged"))

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid captcha"


async def test_register_requires_captcha(client):
    payload = registration()
    del payload["captchaToken"]

    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid captcha"


async def test_register_reports_field_errors(client):
    response = await client.post("/auth/register", json=registration(username="ab"))

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert {"field": "username", "message": "Username must be at least 3 characters"} in error["details"]["errors"]


async def test_login_returns_token(client, db):
    await create_user(db, "grace", password="hopper1")

    response = await client.post("/auth/login", json={"username": "grace", "password": "hopper1"})

    assert response.status_code == 200
    body = response.json()
    assert body["accessToken"]
    assert body["tokenType"] == "bearer"
    assert body["user"]["username"] == "grace"


async def test_login_rejects_wrong_password(client, db):
    await create_user(db, "grace", password="hopper1")

    response = await client.post("/auth/login", json={"username": "grace", "password": "wrong"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid username or password"


async def test_login_token_opens_profile(client, db):
    await create_user(db, "grace", password="hopper1")
    login = await client.post("/auth/login", json={"username": "grace", "password": "hopper1"})
    token = login.json()["accessToken"]

    response = await client.get("/profile/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["username"] == "grace"


async def test_invalid_token_is_rejected(client):
    response = await client.get("/profile/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
