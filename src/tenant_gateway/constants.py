"""
tenant_gateway.constants

Static provisioning defaults.

Responsibilities:
- Describe the wallet account template attached to every new sub-organization.
- Hold fixed labels used when provisioning tenants and starting OTP flows.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

# Exactly one account per new wallet: secp256k1 key at the first BIP-44 Ethereum path.
DEFAULT_ETHEREUM_ACCOUNTS: tuple[MappingProxyType[str, str], ...] = (
    MappingProxyType(
        {
            "curve": "CURVE_SECP256K1",
            "pathFormat": "PATH_FORMAT_BIP32",
            "path": "m/44'/60'/0'/0/0",
            "addressFormat": "ADDRESS_FORMAT_ETHEREUM",
        }
    ),
)

DEFAULT_WALLET_NAME = "ETH wallet"
PASSKEY_AUTHENTICATOR_NAME = "Passkey"
ROOT_USER_NAME_PREFIX = "Kokio User"
SUB_ORGANIZATION_NAME_PREFIX = "Sub-organization"
ROOT_QUORUM_THRESHOLD = 1

EMAIL_FILTER_TYPE = "EMAIL"
EMAIL_OTP_TYPE = "OTP_TYPE_EMAIL"


def default_accounts() -> list[dict[str, Any]]:
    # Fresh mutable copies for request payloads; the template itself stays read-only.
    return [dict(account) for account in DEFAULT_ETHEREUM_ACCOUNTS]
