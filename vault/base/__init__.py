"""Abstract blueprints and core utilities.

Every resource inherits from :class:`ResourceBlueprint` and talks to Vault
through a :class:`LogicalBlueprint`. Import them to type-hint your own code
or to plug in a custom client.
"""

from .api import LogicalBlueprint
from .resource import ResourceBlueprint
from .state import ResourceData
from .supported_resources import existing_resources


__all__ = [
    "LogicalBlueprint",
    "ResourceBlueprint",
    "ResourceData",
    "existing_resources",
]
