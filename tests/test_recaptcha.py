"""Tests for captcha verification. Every failure mode rejects the token."""

import httpx

from zelene.shared.adapters.recaptcha_adapter import RecaptchaAdapter


def adapter_for(handler) -> RecaptchaAdapter:
    return RecaptchaAdapter(
        secret_key="server-secret",
        verify_url="https://captcha.test/verify",
        transport=httpx.MockTransport(handler),
    )


async def test_confirmed_token_passes():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = request.content.decode()
        return httpx.Response(200, json={"success": True})

    assert await adapter_for(handler).verify("token-1") is True
    assert "secret=server-secret" in seen["body"]
    assert "response=token-1" in seen["body"]


async def test_rejected_token_fails():
    adapter = adapter_for(lambda request: httpx.Response(200, json={"success": False, "error-codes": ["bad"]}))

    assert await adapter.verify("token-1") is False


async def test_missing_token_skips_the_request():
    def handler(request):
        raise AssertionError("no request expected")

    assert await adapter_for(handler).verify(None) is False
    assert await adapter_for(handler).verify("") is False


async def test_server_error_fails_closed():
    adapter = adapter_for(lambda request: httpx.Response(500))

    assert await adapter.verify("token-1") is False


async def test_network_error_fails_closed():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    assert await adapter_for(handler).verify("token-1") is False


async def test_non_json_body_fails_closed():
    adapter = adapter_for(lambda request: httpx.Response(200, text="<html>"))

    assert await adapter.verify("token-1") is False


async def test_truthy_non_boolean_success_fails():
    adapter = adapter_for(lambda request: httpx.Response(200, json={"success": "yes"}))

    assert await adapter.verify("token-1") is False
