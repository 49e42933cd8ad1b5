"""
tests.conftest

Shared fixtures for gateway tests.

Responsibilities:
- Provide deterministic Settings without reading the process env or `.env`.
- Provide a recording provider double that never touches the network.
"""

from __future__ import annotations

from typing import Any

import pytest

from tenant_gateway.errors import ProviderError
from tenant_gateway.settings import Settings


class FakeProvider:
    """Records every call; responses and failures are configured per test."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.organization_ids: list[str] = []
        self.challenge: dict[str, Any] = {"otpId": "otp-1"}
        self.otp_result: dict[str, Any] = {
            "userId": "user-1",
            "apiKeyId": "key-1",
            "credentialBundle": "bundle-1",
        }
        self.created: dict[str, Any] = {
            "subOrganizationId": "sub-1",
            "wallet": {"walletId": "wallet-1", "addresses": ["0xabc"]},
            "rootUserIds": ["root-1"],
        }
        self.fail: dict[str, str] = {}

    def _record(self, op: str, kwargs: dict[str, Any]) -> None:
        self.calls.append((op, kwargs))
        if op in self.fail:
            raise ProviderError(self.fail[op])

    def called(self, op: str) -> list[dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == op]

    async def lookup_tenants_by_email(self, **kwargs: Any) -> dict[str, Any]:
        self._record("lookup_tenants_by_email", kwargs)
        return {"organizationIds": list(self.organization_ids)}

    async def initiate_otp(self, **kwargs: Any) -> dict[str, Any]:
        self._record("initiate_otp", kwargs)
        return dict(self.challenge)

    async def complete_otp(self, **kwargs: Any) -> dict[str, Any]:
        self._record("complete_otp", kwargs)
        return dict(self.otp_result)

    async def create_tenant(self, **kwargs: Any) -> dict[str, Any]:
        self._record("create_tenant", kwargs)
        return dict(self.created)


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        parent_org_id="parent-org",
        api_base_url="https://api.turnkey.test",
        api_public_key="02" + "ab" * 32,
        api_private_key="cd" * 32,
    )


@pytest.fixture()
def provider() -> FakeProvider:
    return FakeProvider()
