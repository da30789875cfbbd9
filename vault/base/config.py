"""
Pydantic configuration model for the Vault connection.

Validates the connection config at initialization time instead of
silently passing bad values to the hvac client.
"""

from __future__ import annotations

import os
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator

_TRUTHY = {"1", "true", "yes", "on"}


class VaultConfig(BaseModel):
    """Configuration for the Vault API client.

    Values are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (VAULT_ADDR, VAULT_TOKEN, VAULT_NAMESPACE,
       VAULT_SKIP_VERIFY, VAULT_CLIENT_TIMEOUT).
    3. Field defaults. ``url`` has none and must come from 1 or 2.
    """

    model_config = ConfigDict(extra="forbid")

    url: str | None = Field(default=None, description="Vault address (e.g. 'https://vault:8200')")
    token: str | None = Field(default=None, description="Vault token")
    namespace: str | None = Field(default=None, description="Vault Enterprise namespace")
    verify: bool = Field(default=True, description="Verify the server TLS certificate")
    timeout: int = Field(default=30, gt=0, description="Request timeout in seconds")

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing settings."""
        env_map = {
            "url": "VAULT_ADDR",
            "token": "VAULT_TOKEN",
            "namespace": "VAULT_NAMESPACE",
        }
        for field, env_var in env_map.items():
            if not values.get(field):
                values[field] = os.environ.get(env_var)
        if "verify" not in values and os.environ.get("VAULT_SKIP_VERIFY", "").lower() in _TRUTHY:
            values["verify"] = False
        if "timeout" not in values and os.environ.get("VAULT_CLIENT_TIMEOUT"):
            values["timeout"] = os.environ["VAULT_CLIENT_TIMEOUT"]
        return values

    @model_validator(mode="after")
    def validate_url(self) -> VaultConfig:
        """Ensure a Vault address is known."""
        if not self.url:
            raise ValueError(
                "Vault url is required. Set it explicitly or via the "
                "VAULT_ADDR environment variable."
            )
        return self


def validate_config(config: dict) -> VaultConfig:
    """Validate and return a typed Vault config model.

    Args:
        config: Raw configuration dictionary.

    Returns:
        A validated :class:`VaultConfig`.

    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    return VaultConfig(**config)


__all__ = [
    "VaultConfig",
    "validate_config",
]
