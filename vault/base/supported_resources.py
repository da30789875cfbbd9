from typing import Literal


existing_resources = Literal[
    "terraform_cloud_secret_backend_role",
    "identity_entity_alias",
]
