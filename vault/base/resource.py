"""Resource service blueprint."""

from abc import ABC, abstractmethod

from .api import LogicalBlueprint
from .state import ResourceData


class ResourceBlueprint(ABC):
    """Abstract interface for a declaratively managed Vault resource.

    Each operation receives the resource's :class:`ResourceData` and
    reconciles it against Vault through the injected logical client.
    Operations are synchronous and are never invoked concurrently for the
    same resource instance.

    Attributes:
        client: Logical API client used for every remote call.
    """

    resource_type: str = ""

    def __init__(self, client: LogicalBlueprint) -> None:
        self.client = client

    @abstractmethod
    def create(self, data: ResourceData) -> None:
        """Create the remote object described by *data* and sync *data* from it."""

    @abstractmethod
    def read(self, data: ResourceData) -> None:
        """Refresh *data* from the remote object identified by ``data.id``."""

    @abstractmethod
    def update(self, data: ResourceData) -> None:
        """Apply the description in *data* to the existing remote object."""

    @abstractmethod
    def delete(self, data: ResourceData) -> None:
        """Delete the remote object identified by ``data.id``."""

    @abstractmethod
    def exists(self, data: ResourceData) -> bool:
        """Return whether the remote object behind *data* exists."""

    def import_state(self, identifier: str) -> ResourceData:
        """Start tracking an existing remote object by its identity string.

        The identity is passed through unchanged; a following :meth:`read`
        populates the attributes.

        Args:
            identifier: Resource identity (role path or alias id).

        Returns:
            A new :class:`ResourceData` carrying only the identity.
        """
        return ResourceData(id=identifier)
