"""Tests for password hashing, tokens and role checks."""

from datetime import timedelta

import pytest

from zelene.shared.core.exceptions import AuthorizationError
from zelene.shared.models import UserRole
from zelene.shared.utils.security import ADMIN_ROLES, SecurityUtils, ensure_role, has_role


def test_password_round_trip():
    hashed = SecurityUtils.hash_password("secret1")

    assert hashed != "secret1"
    assert SecurityUtils.verify_password("secret1", hashed) is True
    assert SecurityUtils.verify_password("secret2", hashed) is False


def test_missing_hash_never_matches():
    assert SecurityUtils.verify_password("anything", None) is False


def test_token_carries_claims():
    token = SecurityUtils.create_access_token({"user_id": "u1", "role": "ADMIN"}, "key")

    payload = SecurityUtils.decode_access_token(token, "key")

    assert payload["user_id"] == "u1"
    assert payload["role"] == "ADMIN"


def test_expired_token_is_rejected():
    token = SecurityUtils.create_access_token({"user_id": "u1"}, "key", expires_delta=timedelta(seconds=-1))

    with pytest.raises(ValueError, match="expired"):
        SecurityUtils.decode_access_token(token, "key")


def test_token_with_wrong_key_is_rejected():
    token = SecurityUtils.create_access_token({"user_id": "u1"}, "key")

    with pytest.raises(ValueError):
        SecurityUtils.decode_access_token(token, "other-key")


@pytest.mark.parametrize(
    "role, allowed",
    [("ADMIN", True), (UserRole.TENANT_ADMIN, True), ("MEMBER", False), ("ROOT", False), (None, False)],
)
def test_has_role(role, allowed):
    assert has_role(role, ADMIN_ROLES) is allowed


def test_ensure_role_message():
    with pytest.raises(AuthorizationError, match="Admins only"):
        ensure_role("MEMBER", ADMIN_ROLES, "Admins only")


async def test_health_endpoints(client):
    assert (await client.get("/health")).json()["status"] == "healthy"
    assert (await client.get("/live")).json() == {"status": "alive"}
    assert (await client.get("/ready")).json() == {"status": "ready"}
