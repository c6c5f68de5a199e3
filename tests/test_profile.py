"""Tests for profile reads and partial settings updates."""

import uuid

from tests.conftest import auth_header, create_user


async def test_new_member_has_empty_sections(client, member):
    response = await client.get("/profile/me", headers=auth_header(member))

    body = response.json()
    assert body["username"] == "member"
    assert body["profile"] is None
    assert body["social"] is None


async def test_partial_update_creates_sections(client, member):
    response = await client.patch(
        "/profile/me",
        json={"profile": {"bio": "Writes compilers", "location": "Lisbon"}, "social": {"github": "https://github.com/m"}},
        headers=auth_header(member),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["profile"]["bio"] == "Writes compilers"
    assert body["profile"]["location"] == "Lisbon"
    assert body["social"]["github"] == "https://github.com/m"


async def test_partial_update_keeps_other_fields(client, member):
    headers = auth_header(member)
    await client.patch("/profile/me", json={"profile": {"bio": "Bio", "work": "Acme"}}, headers=headers)

    response = await client.patch("/profile/me", json={"profile": {"work": "Initech"}}, headers=headers)

    profile = response.json()["profile"]
    assert profile["bio"] == "Bio"
    assert profile["work"] == "Initech"


async def test_account_fields_update(client, member):
    response = await client.patch(
        "/profile/me",
        json={"user": {"name": "New Name", "email": "new@example.com"}},
        headers=auth_header(member),
    )

    body = response.json()
    assert body["name"] == "New Name"
    assert body["email"] == "new@example.com"
    assert body["username"] == "member"


async def test_username_taken_by_someone_else(client, db, member):
    await create_user(db, "taken")

    response = await client.patch("/profile/me", json={"user": {"username": "taken"}}, headers=auth_header(member))

    assert response.status_code == 409


async def test_keeping_own_username_is_not_a_conflict(client, member):
    response = await client.patch("/profile/me", json={"user": {"username": "member"}}, headers=auth_header(member))

    assert response.status_code == 200


async def test_invalid_fields_are_reported(client, member):
    response = await client.patch(
        "/profile/me",
        json={"profile": {"location": "x" * 101}, "social": {"website": "nope"}},
        headers=auth_header(member),
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["error"]["details"]["errors"]}
    assert fields == {"profile.location", "social.website"}


async def test_public_profile(client, member):
    response = await client.get(f"/profile/{member.id}")

    assert response.status_code == 200
    assert response.json()["id"] == str(member.id)


async def test_unknown_profile(client):
    response = await client.get(f"/profile/{uuid.uuid4()}")

    assert response.status_code == 404
