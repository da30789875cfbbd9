"""Vaultjack — declarative Vault resources over a logical API client.

Entry point for the library. Import :func:`resource_factory` to create
any resource handler with a single call::

    from vault import ResourceData, resource_factory

    roles = resource_factory("terraform_cloud_secret_backend_role", {"url": "http://vault:8200"})
    role = ResourceData({"backend": "terraform", "name": "ci", "organization": "acme"})
    roles.create(role)
"""

from .base import (
    LogicalBlueprint,
    ResourceBlueprint,
    ResourceData,
)
from .factory import resource_factory

__all__ = [
    "LogicalBlueprint",
    "ResourceBlueprint",
    "ResourceData",
    "resource_factory",
]
