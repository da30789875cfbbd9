from .terraform_cloud_role import TerraformCloudRole
from .identity_entity_alias import IdentityEntityAlias

__all__ = ["TerraformCloudRole", "IdentityEntityAlias"]
