"""
tests.test_auth_routes

HTTP-level tests for the public auth endpoints (status codes and body shapes).
"""

from __future__ import annotations

import httpx
import pytest

from tenant_gateway.api.app import create_app
from tenant_gateway.provider.turnkey import TurnkeyClient


def _client(settings, provider) -> httpx.AsyncClient:
    app = create_app(settings=settings, provider=provider)
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,body",
    [
        ("/api/init-email-otp-auth", {}),
        ("/api/check-email", {"email": ""}),
        ("/api/otp-auth", {"otpId": "o", "organizationId": "org"}),
        ("/api/create-sub-organization", {"user": {"userId": "u1"}}),
        ("/api/create-sub-organization", {"passkey": {"challenge": "c"}}),
    ],
)
async def test_missing_fields_are_client_errors_without_provider_calls(
    settings, provider, path, body
) -> None:
    async with _client(settings, provider) as client:
        r = await client.post(path, json=body)

    assert r.status_code == 400
    assert "error" in r.json()
    assert provider.calls == []


@pytest.mark.asyncio
async def test_non_object_body_is_a_client_error(settings, provider) -> None:
    async with _client(settings, provider) as client:
        r = await client.post("/api/check-email", json=["a@x.com"])

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body."}
    assert provider.calls == []


@pytest.mark.asyncio
async def test_unknown_email_scenario(settings, provider) -> None:
    async with _client(settings, provider) as client:
        check = await client.post("/api/check-email", json={"email": "a@x.com"})
        init = await client.post("/api/init-email-otp-auth", json={"email": "a@x.com"})

    assert check.status_code == 200
    assert check.json() == {"inUse": False, "organizationIds": []}
    assert init.status_code == 404
    assert init.json() == {"error": "User organization not found. Please register first."}
    assert provider.called("initiate_otp") == []


@pytest.mark.asyncio
async def test_init_email_otp_auth_success(settings, provider) -> None:
    provider.organization_ids = ["org-a"]

    async with _client(settings, provider) as client:
        r = await client.post("/api/init-email-otp-auth", json={"email": "a@x.com"})

    assert r.status_code == 200
    assert r.json() == {"result": {"otpId": "otp-1"}, "organizationId": "org-a"}


@pytest.mark.asyncio
async def test_otp_auth_returns_credential_bundle_only(settings, provider) -> None:
    async with _client(settings, provider) as client:
        r = await client.post(
            "/api/otp-auth",
            json={
                "otpId": "otp-1",
                "otpCode": "123456",
                "organizationId": "org-a",
                "targetPublicKey": "04ff",
                "expirationSeconds": 900,
            },
        )

    assert r.status_code == 200
    assert r.json() == {"credentialBundle": "bundle-1"}
    [call] = provider.called("complete_otp")
    assert call["target_public_key"] == "04ff"
    assert call["expiration_seconds"] == 900
    assert call["invalidate_existing"] is None


@pytest.mark.asyncio
async def test_otp_auth_provider_error_includes_details(settings, provider) -> None:
    provider.fail["complete_otp"] = "otp expired"

    async with _client(settings, provider) as client:
        r = await client.post(
            "/api/otp-auth",
            json={"otpId": "otp-1", "otpCode": "123456", "organizationId": "org-a"},
        )

    assert r.status_code == 500
    assert r.json() == {"error": "OTP authentication failed.", "details": "otp expired"}


@pytest.mark.asyncio
async def test_create_sub_organization_passes_response_through(settings, provider) -> None:
    async with _client(settings, provider) as client:
        r = await client.post(
            "/api/create-sub-organization",
            json={
                "user": {"userId": "u1", "email": "a@x.com"},
                "passkey": {"challenge": "c", "attestation": {"credentialId": "id"}},
                "apiKeys": [],
            },
        )

    assert r.status_code == 200
    assert r.json() == provider.created
    [call] = provider.called("create_tenant")
    assert call["organization_id"] == "parent-org"


@pytest.mark.asyncio
async def test_check_email_provider_error_is_generic(settings, provider) -> None:
    provider.fail["lookup_tenants_by_email"] = "connection reset"

    async with _client(settings, provider) as client:
        r = await client.post("/api/check-email", json={"email": "a@x.com"})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to check email availability."}


@pytest.mark.asyncio
async def test_invalid_json_syntax_is_a_client_error(settings, provider) -> None:
    async with _client(settings, provider) as client:
        r = await client.post(
            "/api/check-email",
            content=b"{",
            headers={"Content-Type": "application/json"},
        )

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body."}
    assert provider.calls == []


@pytest.mark.asyncio
async def test_init_email_otp_auth_provider_error_is_generic(settings, provider) -> None:
    provider.organization_ids = ["org-a"]
    provider.fail["initiate_otp"] = "rate limited"

    async with _client(settings, provider) as client:
        r = await client.post("/api/init-email-otp-auth", json={"email": "a@x.com"})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to initialize OTP auth."}


@pytest.mark.asyncio
async def test_create_sub_organization_provider_error_includes_details(
    settings, provider
) -> None:
    provider.fail["create_tenant"] = "quota exceeded"

    async with _client(settings, provider) as client:
        r = await client.post(
            "/api/create-sub-organization",
            json={"user": {"userId": "u1"}, "passkey": {"challenge": "c", "attestation": {}}},
        )

    assert r.status_code == 500
    assert r.json() == {
        "error": "Failed to create sub-organization.",
        "details": "quota exceeded",
    }


def _turnkey_backed_client(settings, handler) -> httpx.AsyncClient:
    turnkey_http = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url=settings.api_base_url
    )
    return _client(settings, TurnkeyClient(settings=settings, http=turnkey_http))


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[], "x", None])
async def test_unexpected_turnkey_body_yields_json_error(settings, body) -> None:
    async with _turnkey_backed_client(
        settings, lambda r: httpx.Response(200, json=body)
    ) as client:
        r = await client.post("/api/check-email", json={"email": "a@x.com"})

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {"error": "Failed to check email availability."}


@pytest.mark.asyncio
async def test_unusable_private_key_yields_json_error(settings) -> None:
    broken = settings.model_copy(update={"api_private_key": "not-hex"})

    async with _turnkey_backed_client(
        broken, lambda r: httpx.Response(200, json={"organizationIds": []})
    ) as client:
        r = await client.post("/api/check-email", json={"email": "a@x.com"})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to check email availability."}
