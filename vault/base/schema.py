"""
Pydantic schemas for the declarative surface of each resource.

A schema validates a description before anything is written to Vault.
``FORCE_NEW`` lists the fields that cannot change once the remote object
exists and ``DEPRECATED`` maps deprecated fields to their replacement.
"""

from __future__ import annotations

from typing import Any, ClassVar
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError


class TerraformCloudRoleSchema(BaseModel):
    """Schema of a Terraform Cloud secrets backend role."""

    model_config = ConfigDict(extra="forbid")

    FORCE_NEW: ClassVar[tuple[str, ...]] = ("name", "backend")
    DEPRECATED: ClassVar[dict[str, str]] = {"path": "backend"}

    name: str = Field(
        min_length=1,
        description="The name of an existing role against which to create this Terraform Cloud credential",
    )
    backend: str | None = Field(
        default=None,
        description="The path of the Terraform Cloud Secret Backend the role belongs to.",
    )
    path: str | None = Field(
        default=None,
        description="The path of the Terraform Cloud Secret Backend the role belongs to. Deprecated: use `backend` instead.",
    )
    organization: str = Field(
        description="Name of the Terraform Cloud or Enterprise organization",
    )
    team_id: str | None = Field(
        default=None,
        description="ID of the Terraform Cloud or Enterprise team under organization (e.g., settings/teams/team-xxxxxxxxxxxxx)",
    )
    user_id: str | None = Field(
        default=None,
        description="ID of the Terraform Cloud or Enterprise user (e.g., user-xxxxxxxxxxxxxxxx)",
    )
    max_ttl: int = Field(
        default=0,
        ge=0,
        description="Maximum lease for generated credentials. If not set or set to 0, will use system default.",
    )
    ttl: int = Field(
        default=0,
        ge=0,
        description="Default lease for generated credentials. If not set or set to 0, will use system default.",
    )


class IdentityEntityAliasSchema(BaseModel):
    """Schema of an identity entity alias."""

    model_config = ConfigDict(extra="forbid")

    FORCE_NEW: ClassVar[tuple[str, ...]] = ()
    DEPRECATED: ClassVar[dict[str, str]] = {}

    name: str = Field(min_length=1, description="Name of the entity alias.")
    mount_accessor: str = Field(
        min_length=1, description="Mount accessor to which this alias belongs to."
    )
    canonical_id: str = Field(
        min_length=1, description="ID of the entity to which this is an alias."
    )
    custom_metadata: dict[str, str] = Field(
        default_factory=dict,
        description="Custom metadata to be associated with this alias.",
    )


# Map resource types to their schema models for dynamic validation
SCHEMA_REGISTRY: dict[str, type[BaseModel]] = {
    "terraform_cloud_secret_backend_role": TerraformCloudRoleSchema,
    "identity_entity_alias": IdentityEntityAliasSchema,
}


def validate_schema(resource_type: str, attributes: dict[str, Any]) -> BaseModel:
    """Validate a declarative description against its resource schema.

    ``None`` values are treated as absent so optional fields may be passed
    through unset.

    Args:
        resource_type: Registered resource type name.
        attributes: Raw attribute mapping.

    Returns:
        The validated schema model.

    Raises:
        ValueError: If the resource type is unknown.
        ConfigurationError: If the description is invalid.
    """
    model = SCHEMA_REGISTRY.get(resource_type)
    if model is None:
        raise ValueError(f"No schema registered for resource type: {resource_type}")
    try:
        return model(**{k: v for k, v in attributes.items() if v is not None})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {resource_type} configuration: {e}") from e


__all__ = [
    "TerraformCloudRoleSchema",
    "IdentityEntityAliasSchema",
    "SCHEMA_REGISTRY",
    "validate_schema",
]
