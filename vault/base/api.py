"""Logical API blueprint: the narrow capability resources depend on."""

from abc import ABC, abstractmethod
from typing import Any


class LogicalBlueprint(ABC):
    """Abstract interface for path-addressed Vault API calls.

    Maps to Vault's logical API (``/v1/<path>``). Responses are the Vault
    response envelope, e.g. ``{"data": {...}, "lease_id": "", ...}``.
    """

    @abstractmethod
    def read(self, path: str) -> dict[str, Any] | None:
        """Read the object at *path*.

        Args:
            path: Vault path, with or without a leading slash.

        Returns:
            The response envelope, or ``None`` if nothing exists at *path*.
        """

    @abstractmethod
    def write(self, path: str, data: dict[str, Any]) -> dict[str, Any] | None:
        """Write *data* to *path*.

        Args:
            path: Vault path.
            data: Request body.

        Returns:
            The response envelope, or ``None`` if the server returned no body.
        """

    @abstractmethod
    def delete(self, path: str) -> None:
        """Delete the object at *path*."""
