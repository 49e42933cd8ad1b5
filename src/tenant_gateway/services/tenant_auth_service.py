"""
tenant_gateway.services.tenant_auth_service

Tenant auth orchestration service.

Responsibilities:
- Validate request shape before any provider call is made.
- Sequence provider lookups and calls (find-or-register by email, then OTP or provisioning).
- Map provider failures to operation-level errors, with or without message passthrough.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from tenant_gateway.constants import (
    DEFAULT_WALLET_NAME,
    EMAIL_FILTER_TYPE,
    EMAIL_OTP_TYPE,
    PASSKEY_AUTHENTICATOR_NAME,
    ROOT_QUORUM_THRESHOLD,
    ROOT_USER_NAME_PREFIX,
    SUB_ORGANIZATION_NAME_PREFIX,
    default_accounts,
)
from tenant_gateway.errors import NotRegistered, ProviderError, ValidationError
from tenant_gateway.observability.logging import get_logger
from tenant_gateway.provider.base import TenantProvider

log = get_logger(__name__)


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class TenantAuthGateway:
    def __init__(
        self,
        *,
        provider: TenantProvider,
        parent_org_id: str,
        clock: Callable[[], int] = _epoch_ms,
    ) -> None:
        self._provider = provider
        self._parent_org_id = parent_org_id
        self._clock = clock

    async def _organization_ids_for(self, email: str) -> list[str]:
        found = await self._provider.lookup_tenants_by_email(
            filter_type=EMAIL_FILTER_TYPE,
            filter_value=email,
        )
        return list(found.get("organizationIds") or [])

    async def init_email_otp_auth(self, *, email: str | None) -> dict[str, Any]:
        if not email:
            raise ValidationError("Email is required.")

        try:
            organization_ids = await self._organization_ids_for(email)
            if not organization_ids:
                log.warning("otp_init_unregistered_email", email=email)
                raise NotRegistered("User organization not found. Please register first.")

            # Several tenants may share an email; the first one listed wins.
            organization_id = organization_ids[0]
            result = await self._provider.initiate_otp(
                organization_id=organization_id,
                otp_type=EMAIL_OTP_TYPE,
                contact=email,
            )
        except ProviderError as e:
            log.error("otp_init_failed", error=e.message)
            raise ProviderError("Failed to initialize OTP auth.") from e

        log.info("otp_init_started", organization_id=organization_id, otp_id=result.get("otpId"))
        return {"result": result, "organizationId": organization_id}

    async def otp_auth(
        self,
        *,
        otp_id: str | None,
        otp_code: str | None,
        organization_id: str | None,
        target_public_key: str | None = None,
        expiration_seconds: str | int | None = None,
        invalidate_existing: bool | None = None,
    ) -> dict[str, Any]:
        if not otp_id or not otp_code or not organization_id:
            raise ValidationError("Missing required parameters for OTP auth.")

        try:
            result = await self._provider.complete_otp(
                otp_id=otp_id,
                otp_code=otp_code,
                organization_id=organization_id,
                target_public_key=target_public_key,
                expiration_seconds=expiration_seconds,
                invalidate_existing=invalidate_existing,
            )
        except ProviderError as e:
            log.error("otp_auth_failed", organization_id=organization_id, error=e.message)
            raise ProviderError("OTP authentication failed.", details=e.message) from e

        log.info("otp_auth_completed", organization_id=organization_id, otp_id=otp_id)
        return {"credentialBundle": result.get("credentialBundle")}

    async def create_sub_organization(
        self,
        *,
        user: dict[str, Any] | None,
        passkey: dict[str, Any] | None,
        api_keys: list[Any] | None = None,
    ) -> dict[str, Any]:
        """
        Provision a tenant for `user`, authenticated by `passkey`.

        Always created under the parent organization with a single-signer root quorum
        and one ETH wallet holding the default account. `api_keys` is used when the
        user record carries none.
        """

        if not user or not user.get("userId") or not passkey:
            raise ValidationError("Missing authenticator parameters or user details.")

        user_id = user["userId"]
        authenticator = {
            "authenticatorName": PASSKEY_AUTHENTICATOR_NAME,
            "challenge": passkey.get("challenge"),
            "attestation": passkey.get("attestation"),
        }
        root_user = {
            "userName": f"{ROOT_USER_NAME_PREFIX} {user_id}",
            "userEmail": user.get("email") or "",
            "apiKeys": user.get("apiKeys") or api_keys or [],
            "authenticators": [authenticator],
            "oauthProviders": [],
        }
        sub_organization_name = f"{SUB_ORGANIZATION_NAME_PREFIX} - {user_id} {self._clock()}"

        try:
            response = await self._provider.create_tenant(
                organization_id=self._parent_org_id,
                sub_organization_name=sub_organization_name,
                root_quorum_threshold=ROOT_QUORUM_THRESHOLD,
                root_users=[root_user],
                wallet={"walletName": DEFAULT_WALLET_NAME, "accounts": default_accounts()},
            )
        except ProviderError as e:
            log.error("sub_organization_create_failed", user_id=user_id, error=e.message)
            raise ProviderError("Failed to create sub-organization.", details=e.message) from e

        log.info(
            "sub_organization_created",
            user_id=user_id,
            sub_organization_name=sub_organization_name,
            sub_organization_id=response.get("subOrganizationId"),
        )
        return response

    async def check_email(self, *, email: str | None) -> dict[str, Any]:
        if not email:
            raise ValidationError("Email is required.")

        try:
            organization_ids = await self._organization_ids_for(email)
        except ProviderError as e:
            log.error("email_check_failed", error=e.message)
            raise ProviderError("Failed to check email availability.") from e

        in_use = len(organization_ids) > 0
        log.info("email_checked", email=email, in_use=in_use)
        return {"inUse": in_use, "organizationIds": organization_ids if in_use else []}


# --- Module Notes -----------------------------------------------------------
# The service is stateless between calls; the only shared values are the injected
# provider, the parent organization id and the clock.
