"""
tenant_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the API and provider layers.
- Require the Turnkey credentials and parent organization id at startup.
- Hide secrets from repr/logging (e.g., the API private key).
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Immutable process configuration.

    Turnkey values keep their historical env var names (`TURNKEY_*`) so existing
    `.env` files work unchanged; gateway-only knobs use the `GATEWAY_` prefix.
    Built once at process start and passed explicitly into `create_app`.
    """

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "tenant-gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "api_port"))

    # Turnkey
    parent_org_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("TURNKEY_PARENT_ORG_ID", "parent_org_id"),
    )
    api_base_url: str = Field(
        min_length=1,
        validation_alias=AliasChoices("TURNKEY_API_URL", "api_base_url"),
    )
    # Compressed P-256 point, hex.
    api_public_key: str = Field(
        pattern=r"^0[23][0-9a-fA-F]{64}$",
        validation_alias=AliasChoices("TURNKEY_API_PUBLIC_KEY", "api_public_key"),
    )
    # Raw P-256 scalar, hex.
    api_private_key: str = Field(
        pattern=r"^[0-9a-fA-F]{1,64}$",
        repr=False,
        validation_alias=AliasChoices("TURNKEY_API_PRIVATE_KEY", "api_private_key"),
    )


def load_settings() -> Settings:
    # Raises pydantic.ValidationError when a required value is absent or malformed.
    return Settings()  # type: ignore[call-arg]


# --- Module Notes -----------------------------------------------------------
# No cached global instance: the entrypoint builds one Settings
# value and threads it through the app factory.
