"""
tenant_gateway.provider.turnkey

HTTP client for the Turnkey public API.

Responsibilities:
- Stamp every request with the configured API key pair.
- Call the query and activity endpoints the gateway needs.
- Unwrap activity results and normalize every failure into `ProviderError`.
"""

from __future__ import annotations

import json
import time
from typing import Any

import httpx

from tenant_gateway.errors import ProviderError
from tenant_gateway.observability.logging import get_logger
from tenant_gateway.provider.stamper import ApiKeyStamper
from tenant_gateway.settings import Settings

log = get_logger(__name__)

ACTIVITY_STATUS_COMPLETED = "ACTIVITY_STATUS_COMPLETED"

# endpoint -> (activity type, key under `activity.result`)
_ACTIVITIES: dict[str, tuple[str, str]] = {
    "init_otp_auth": ("ACTIVITY_TYPE_INIT_OTP_AUTH", "initOtpAuthResult"),
    "otp_auth": ("ACTIVITY_TYPE_OTP_AUTH", "otpAuthResult"),
    "create_sub_organization": (
        "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION_V7",
        "createSubOrganizationResultV7",
    ),
}


def _now_ms() -> str:
    return str(int(time.time() * 1000))


class TurnkeyClient:
    """
    `TenantProvider` implementation backed by Turnkey's REST API.

    Activities are submitted once; a response that is not already completed is
    reported as a failure rather than polled.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        http: httpx.AsyncClient,
        stamper: ApiKeyStamper | None = None,
    ) -> None:
        self._settings = settings
        self._http = http
        self._stamper = stamper or ApiKeyStamper(
            public_key=settings.api_public_key,
            private_key=settings.api_private_key,
        )

    async def _post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        payload = json.dumps(body).encode("utf-8")
        try:
            header, stamp = self._stamper.stamp(payload)
        except ValueError as e:
            log.error("turnkey_stamp_failed", path=path, error=str(e))
            raise ProviderError("could not stamp request with the configured API key") from e
        try:
            r = await self._http.post(
                path,
                content=payload,
                headers={header: stamp, "Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            log.error("turnkey_transport_error", path=path, error=str(e))
            raise ProviderError(str(e) or type(e).__name__) from e

        if r.is_error:
            message = _error_message(r)
            log.error("turnkey_request_failed", path=path, status=r.status_code, error=message)
            raise ProviderError(message)

        try:
            data = r.json()
        except ValueError as e:
            raise ProviderError(f"invalid JSON from {path}") from e
        if not isinstance(data, dict):
            raise ProviderError(f"unexpected response from {path}: {type(data).__name__}")
        return data

    async def _submit(
        self, endpoint: str, *, organization_id: str, parameters: dict[str, Any]
    ) -> dict[str, Any]:
        activity_type, result_key = _ACTIVITIES[endpoint]
        data = await self._post(
            f"/public/v1/submit/{endpoint}",
            {
                "type": activity_type,
                "timestampMs": _now_ms(),
                "organizationId": organization_id,
                "parameters": {k: v for k, v in parameters.items() if v is not None},
            },
        )
        activity = data.get("activity")
        if not isinstance(activity, dict):
            raise ProviderError(f"no activity in response from {endpoint}")
        status = activity.get("status")
        if status != ACTIVITY_STATUS_COMPLETED:
            raise ProviderError(f"activity {activity.get('id', '?')} not completed: {status}")

        results = activity.get("result")
        result = results.get(result_key) if isinstance(results, dict) else None
        if not isinstance(result, dict):
            raise ProviderError(f"activity {activity.get('id', '?')} missing {result_key}")
        return {**result, "activity": {"id": activity.get("id"), "status": status}}

    async def lookup_tenants_by_email(
        self, *, filter_type: str, filter_value: str
    ) -> dict[str, Any]:
        data = await self._post(
            "/public/v1/query/list_suborgs",
            {
                "organizationId": self._settings.parent_org_id,
                "filterType": filter_type,
                "filterValue": filter_value,
            },
        )
        organization_ids = data.get("organizationIds") or []
        if not isinstance(organization_ids, list):
            raise ProviderError("organizationIds is not a list")
        return {"organizationIds": [str(i) for i in organization_ids]}

    async def initiate_otp(
        self, *, organization_id: str, otp_type: str, contact: str
    ) -> dict[str, Any]:
        return await self._submit(
            "init_otp_auth",
            organization_id=organization_id,
            parameters={"otpType": otp_type, "contact": contact},
        )

    async def complete_otp(
        self,
        *,
        otp_id: str,
        otp_code: str,
        organization_id: str,
        target_public_key: str | None = None,
        expiration_seconds: str | int | None = None,
        invalidate_existing: bool | None = None,
    ) -> dict[str, Any]:
        return await self._submit(
            "otp_auth",
            organization_id=organization_id,
            parameters={
                "otpId": otp_id,
                "otpCode": otp_code,
                "targetPublicKey": target_public_key,
                "expirationSeconds": (
                    str(expiration_seconds) if expiration_seconds is not None else None
                ),
                "invalidateExisting": invalidate_existing,
            },
        )

    async def create_tenant(
        self,
        *,
        organization_id: str,
        sub_organization_name: str,
        root_quorum_threshold: int,
        root_users: list[dict[str, Any]],
        wallet: dict[str, Any],
    ) -> dict[str, Any]:
        return await self._submit(
            "create_sub_organization",
            organization_id=organization_id,
            parameters={
                "subOrganizationName": sub_organization_name,
                "rootQuorumThreshold": root_quorum_threshold,
                "rootUsers": root_users,
                "wallet": wallet,
            },
        )


def _error_message(r: httpx.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Turnkey responded with HTTP {r.status_code}"


# --- Module Notes -----------------------------------------------------------
# base_url comes from `Settings.api_base_url`; the shared AsyncClient is owned by the
# app lifespan (see `tenant_gateway.api.app`).
