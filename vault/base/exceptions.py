"""
Vaultjack exception hierarchy.

Every error raised by a resource or a logical client inherits from
:class:`VaultjackError`. Remote failures carry the Vault path they hit so
callers can tell which call of a multi-step operation failed.
"""

from __future__ import annotations


# ── Base ──────────────────────────────────────────────────────────────
class VaultjackError(Exception):
    """Root exception for all Vaultjack errors."""


# ── Declarative configuration ─────────────────────────────────────────
class ConfigurationError(VaultjackError):
    """The declarative description is invalid (missing or conflicting fields)."""


# ── Identity / state ──────────────────────────────────────────────────
class ResourceNotFoundError(VaultjackError):
    """The remote object behind a resource identity does not exist."""


class InvalidResourceIDError(ResourceNotFoundError):
    """The stored identity cannot be parsed back into its components."""


# ── Remote API ────────────────────────────────────────────────────────
class RemoteError(VaultjackError):
    """A call against the Vault API failed.

    Attributes:
        path: Vault path of the failing call, if known.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class RemotePathNotFoundError(RemoteError):
    """Vault answered 404 for a call that does not tolerate absence."""


class PermissionDeniedError(RemoteError):
    """The token is missing or lacks a capability on the path."""


# ── Identity entity alias ─────────────────────────────────────────────
class AmbiguousMergeError(VaultjackError):
    """An alias create was merged into an existing entity without returning an id.

    Attributes:
        alias_id: Id of the matching existing alias, when it could be recovered.
    """

    def __init__(self, message: str, alias_id: str | None = None) -> None:
        self.alias_id = alias_id
        super().__init__(message)
