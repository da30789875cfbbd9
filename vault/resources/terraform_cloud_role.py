"""Terraform Cloud secrets backend role resource.

Manages ``{backend}/role/{name}`` on a Terraform Cloud secrets engine mount.
The identity of a role is its full path.
"""

from __future__ import annotations

import warnings
from typing import Any, Literal, NamedTuple

from vault.base import ResourceBlueprint, ResourceData
from vault.base.exceptions import (
    ConfigurationError,
    InvalidResourceIDError,
    RemoteError,
    RemotePathNotFoundError,
    ResourceNotFoundError,
)
from vault.base.logger import vj_logger
from vault.base.schema import validate_schema

RESOURCE_TYPE = "terraform_cloud_secret_backend_role"

_ROLE_SEPARATOR = "/role/"

# Fields copied verbatim between the description, the payload and the response.
_ROLE_FIELDS = ("organization", "team_id", "user_id", "max_ttl", "ttl")


class RolePath(NamedTuple):
    """Structured form of a role identity ``{backend}/role/{name}``."""

    backend: str
    name: str

    def build(self) -> str:
        return self.backend.strip("/") + _ROLE_SEPARATOR + self.name

    @classmethod
    def parse(cls, path: str) -> RolePath:
        """Split a role identity into backend and name.

        The backend is everything before the last ``/role/`` and the name
        everything after it, so a backend mounted below a ``role`` segment
        still parses.

        Raises:
            InvalidResourceIDError: If either component is missing.
        """
        backend, sep, name = path.rpartition(_ROLE_SEPARATOR)
        if not sep or not backend:
            raise InvalidResourceIDError(f"invalid role ID {path!r}: no backend found")
        if not name:
            raise InvalidResourceIDError(f"invalid role ID {path!r}: no name found")
        return cls(backend, name)


def role_path(backend: str, name: str) -> str:
    return RolePath(backend, name).build()


class BackendRef(NamedTuple):
    """The backend mount together with the field it was declared in."""

    field: Literal["backend", "path"]
    value: str


def resolve_backend(data: ResourceData) -> BackendRef:
    """Pick the backend mount from ``backend`` or the deprecated ``path``.

    Raises:
        ConfigurationError: If both fields or neither field is set, or the
            mount is empty once slashes are stripped.
    """
    backend = data.get_ok("backend")
    path = data.get_ok("path")
    if backend and path:
        raise ConfigurationError(
            '"backend": conflicts with "path"; set only one of them'
        )
    if path:
        ref = BackendRef("path", path)
    elif backend:
        ref = BackendRef("backend", backend)
    else:
        raise ConfigurationError(
            f"No backend specified for Terraform Cloud secret backend role {data.get('name')}"
        )
    if not ref.value.strip("/"):
        raise ConfigurationError(
            f'"{ref.field}": {ref.value!r} is not a valid mount for Terraform Cloud '
            f"secret backend role {data.get('name')}"
        )

    if ref.field == "path":
        # resolve_backend <- _write <- create/update <- caller
        warnings.warn(
            '"path" is deprecated for Terraform Cloud secret backend roles, use "backend" instead',
            DeprecationWarning,
            stacklevel=4,
        )
        vj_logger.warning(
            '"path" is deprecated, use "backend" instead',
            resource=RESOURCE_TYPE,
            path=path,
        )
    return ref


class TerraformCloudRole(ResourceBlueprint):
    """Terraform Cloud secrets backend role.

    Create and update are the same idempotent write. ``name`` and the backend
    are part of the identity and cannot change once the role exists.
    """

    resource_type = RESOURCE_TYPE

    def create(self, data: ResourceData) -> None:
        self._write(data, operation="create")

    def update(self, data: ResourceData) -> None:
        self._write(data, operation="update")

    def _write(self, data: ResourceData, operation: str) -> None:
        validate_schema(RESOURCE_TYPE, data.attributes)
        name = data.get("name")
        backend = resolve_backend(data)
        path = role_path(backend.value, name)

        if data.id and data.id != path:
            raise ConfigurationError(
                f"Terraform Cloud role {data.id!r} cannot be moved to {path!r}; "
                "name and backend are immutable"
            )

        payload: dict[str, Any] = {}
        for field in _ROLE_FIELDS:
            value = data.get_ok(field)
            if value is not None:
                payload[field] = value

        vj_logger.debug(
            f"Configuring Terraform Cloud secrets backend role at {path!r}",
            resource=RESOURCE_TYPE, operation=operation, path=path,
        )
        try:
            self.client.write(path, payload)
        except RemoteError as e:
            raise type(e)(
                f"error writing role configuration for {path!r}: {e}", path=path
            ) from e

        data.set_id(path)
        self.read(data)

    def read(self, data: ResourceData) -> None:
        path = data.id
        try:
            parsed = RolePath.parse(path)
        except InvalidResourceIDError:
            vj_logger.warning(
                f"Removing Terraform Cloud role {path!r} because its ID is invalid",
                resource=RESOURCE_TYPE, operation="read", path=path,
            )
            data.set_id("")
            raise

        vj_logger.debug(
            f"Reading Terraform Cloud secrets backend role at {path!r}",
            resource=RESOURCE_TYPE, operation="read", path=path,
        )
        try:
            response = self.client.read(path)
        except RemoteError as e:
            raise type(e)(
                f"error reading role configuration for {path!r}: {e}", path=path
            ) from e

        if response is None:
            vj_logger.warning(
                f"Terraform Cloud role {path!r} not found, removing from state",
                resource=RESOURCE_TYPE, operation="read", path=path,
            )
            data.set_id("")
            raise ResourceNotFoundError(f"Terraform Cloud role {path!r} not found")

        remote = response.get("data") or {}
        data.set("name", parsed.name)
        # Keep whichever backend field the description was written with.
        if data.is_set("path"):
            data.set("path", parsed.backend)
        else:
            data.set("backend", parsed.backend)
        for field in _ROLE_FIELDS:
            data.set(field, remote.get(field))

    def delete(self, data: ResourceData) -> None:
        path = data.id
        vj_logger.debug(
            f"Deleting Terraform Cloud backend role at {path!r}",
            resource=RESOURCE_TYPE, operation="delete", path=path,
        )
        try:
            self.client.delete(path)
        except RemotePathNotFoundError:
            vj_logger.debug(
                f"Terraform Cloud backend role at {path!r} already absent",
                resource=RESOURCE_TYPE, operation="delete", path=path,
            )
        except RemoteError as e:
            raise type(e)(
                f"error deleting Terraform Cloud backend role at {path!r}: {e}", path=path
            ) from e
        else:
            vj_logger.debug(
                f"Deleted Terraform Cloud backend role at {path!r}",
                resource=RESOURCE_TYPE, operation="delete", path=path,
            )

    def exists(self, data: ResourceData) -> bool:
        path = data.id
        if not path:
            return False
        vj_logger.debug(
            f"Checking Terraform Cloud secrets backend role at {path!r}",
            resource=RESOURCE_TYPE, operation="exists", path=path,
        )
        try:
            response = self.client.read(path)
        except RemoteError as e:
            raise type(e)(
                f"error reading role configuration for {path!r}: {e}", path=path
            ) from e
        return response is not None
