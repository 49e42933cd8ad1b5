"""
tenant_gateway.api.routers.auth

Public tenant auth endpoints.

Responsibilities:
- Start and complete email OTP authentication.
- Provision sub-organizations (tenant + root user + wallet).
- Report whether an email already belongs to a sub-organization.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from tenant_gateway.api.deps import gateway_dep
from tenant_gateway.services.tenant_auth_service import TenantAuthGateway

router = APIRouter(prefix="/api", tags=["auth"])


class _Body(BaseModel):
    # Every field is optional here: missing values are reported by the service as 400s.
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class EmailRequest(_Body):
    email: str | None = None


class OtpAuthRequest(_Body):
    otp_id: str | None = Field(default=None, alias="otpId")
    otp_code: str | None = Field(default=None, alias="otpCode")
    organization_id: str | None = Field(default=None, alias="organizationId")
    target_public_key: str | None = Field(default=None, alias="targetPublicKey")
    expiration_seconds: str | int | None = Field(default=None, alias="expirationSeconds")
    invalidate_existing: bool | None = Field(default=None, alias="invalidateExisting")


class CreateSubOrganizationRequest(_Body):
    user: dict[str, Any] | None = None
    passkey: dict[str, Any] | None = None
    api_keys: list[Any] | None = Field(default=None, alias="apiKeys")


@router.post("/init-email-otp-auth")
async def init_email_otp_auth(
    body: EmailRequest,
    gateway: TenantAuthGateway = Depends(gateway_dep),
) -> dict[str, Any]:
    return await gateway.init_email_otp_auth(email=body.email)


@router.post("/otp-auth")
async def otp_auth(
    body: OtpAuthRequest,
    gateway: TenantAuthGateway = Depends(gateway_dep),
) -> dict[str, Any]:
    return await gateway.otp_auth(
        otp_id=body.otp_id,
        otp_code=body.otp_code,
        organization_id=body.organization_id,
        target_public_key=body.target_public_key,
        expiration_seconds=body.expiration_seconds,
        invalidate_existing=body.invalidate_existing,
    )


@router.post("/create-sub-organization")
async def create_sub_organization(
    body: CreateSubOrganizationRequest,
    gateway: TenantAuthGateway = Depends(gateway_dep),
) -> dict[str, Any]:
    return await gateway.create_sub_organization(
        user=body.user,
        passkey=body.passkey,
        api_keys=body.api_keys,
    )


@router.post("/check-email")
async def check_email(
    body: EmailRequest,
    gateway: TenantAuthGateway = Depends(gateway_dep),
) -> dict[str, Any]:
    return await gateway.check_email(email=body.email)


# --- Module Notes -----------------------------------------------------------
# Error responses are rendered centrally from GatewayError (see `tenant_gateway.api.app`).
