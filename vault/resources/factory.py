"""Resource factory.

Maps resource type names to their implementations.
``RESOURCE_REGISTRY`` is consumed by :func:`vault.factory.resource_factory`.
"""

from vault.resources.terraform_cloud_role import TerraformCloudRole
from vault.resources.identity_entity_alias import IdentityEntityAlias


# Resource registry
RESOURCE_REGISTRY: dict[str, type] = {
    "terraform_cloud_secret_backend_role": TerraformCloudRole,
    "identity_entity_alias": IdentityEntityAlias,
}
