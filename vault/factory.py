"""Resource factory.

Provides :func:`resource_factory`, the single entry-point for creating
resource handlers. The function looks the resource type up in the
resource registry, wires in a logical client and returns a typed instance
via ``@overload`` signatures so IDEs can autocomplete methods.
"""

from typing import overload, Literal, Any

from vault.base import LogicalBlueprint, existing_resources
from vault.base.client_cache import ClientCache
from vault.base.config import validate_config
from vault.client.logical import Logical
from vault.resources.factory import RESOURCE_REGISTRY
from vault.resources.identity_entity_alias import IdentityEntityAlias
from vault.resources.terraform_cloud_role import TerraformCloudRole


@overload
def resource_factory(
    resource_type: Literal["terraform_cloud_secret_backend_role"],
    config: dict | None = None,
    client: LogicalBlueprint | None = None,
) -> TerraformCloudRole: ...


@overload
def resource_factory(
    resource_type: Literal["identity_entity_alias"],
    config: dict | None = None,
    client: LogicalBlueprint | None = None,
) -> IdentityEntityAlias: ...


def resource_factory(
    resource_type: existing_resources,
    config: dict | None = None,
    client: LogicalBlueprint | None = None,
) -> Any:
    """
    Create a resource handler bound to a logical client.
    Args:
        resource_type: The resource type (e.g., 'identity_entity_alias').
        config: Vault connection config, used when no client is given.
        client: Logical client to inject; takes precedence over config.
    Returns:
        An instance of the requested resource class.
    Raises:
        ValueError: If the resource type is not supported.
        pydantic.ValidationError: If the config is invalid.
    """
    if resource_type not in RESOURCE_REGISTRY:
        raise ValueError(f"Unsupported resource type: {resource_type}")

    resource_class = RESOURCE_REGISTRY[resource_type]
    if client is None:
        configObj = validate_config(config or {})
        client = ClientCache().get_or_create(configObj, Logical)
    return resource_class(client)
