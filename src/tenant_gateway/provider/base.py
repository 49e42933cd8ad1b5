"""
tenant_gateway.provider.base

Provider interface consumed by the gateway service.

Responsibilities:
- Declare the four provider operations the gateway relies on.
- Fix the failure contract: every operation raises `ProviderError` on failure.
"""

from __future__ import annotations

from typing import Any, Protocol


class TenantProvider(Protocol):
    """Identity / key-custody provider operations used by the gateway."""

    async def lookup_tenants_by_email(
        self, *, filter_type: str, filter_value: str
    ) -> dict[str, Any]:
        """Return `{"organizationIds": [...]}` for tenants matching the filter."""
        ...

    async def initiate_otp(
        self, *, organization_id: str, otp_type: str, contact: str
    ) -> dict[str, Any]:
        """Start an OTP challenge and return its descriptor (contains `otpId`)."""
        ...

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
        """Complete an OTP challenge; the result carries `credentialBundle`."""
        ...

    async def create_tenant(
        self,
        *,
        organization_id: str,
        sub_organization_name: str,
        root_quorum_threshold: int,
        root_users: list[dict[str, Any]],
        wallet: dict[str, Any],
    ) -> dict[str, Any]:
        """Create a sub-organization under `organization_id`."""
        ...
