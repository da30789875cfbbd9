"""Identity entity alias resource.

An alias ties an identity entity (``canonical_id``) to a name on an auth
mount (``mount_accessor``). Vault assigns the alias id on create; all later
calls address the alias by that id.
"""

from __future__ import annotations

from typing import Any, NoReturn

from vault.base import LogicalBlueprint, ResourceBlueprint, ResourceData
from vault.base.exceptions import (
    AmbiguousMergeError,
    RemoteError,
    ResourceNotFoundError,
)
from vault.base.logger import vj_logger
from vault.base.schema import validate_schema

RESOURCE_TYPE = "identity_entity_alias"

ENTITY_ALIAS_PATH = "/identity/entity-alias"
ENTITY_PATH = "/identity/entity"

_ALIAS_FIELDS = ("name", "mount_accessor", "canonical_id")


def entity_alias_id_path(alias_id: str) -> str:
    return f"{ENTITY_ALIAS_PATH}/id/{alias_id}"


def entity_alias_name_path(name: str) -> str:
    return f"{ENTITY_ALIAS_PATH}/name/{name}"


def entity_id_path(entity_id: str) -> str:
    return f"{ENTITY_PATH}/id/{entity_id}"


def find_alias_id(client: LogicalBlueprint, canonical_id: str, name: str, mount_accessor: str) -> str:
    """Look up the id of an alias through the aliases of its entity.

    Args:
        client: Logical API client.
        canonical_id: Id of the entity owning the alias.
        name: Alias name.
        mount_accessor: Accessor of the auth mount the alias belongs to.

    Returns:
        The alias id.

    Raises:
        ResourceNotFoundError: If the entity or a matching alias does not exist.
        RemoteError: If the entity cannot be read.
    """
    path = entity_id_path(canonical_id)
    try:
        response = client.read(path)
    except RemoteError as e:
        raise type(e)(f"error reading entity aliases: {e}", path=path) from e

    if response is not None:
        aliases = (response.get("data") or {}).get("aliases") or []
        for alias in aliases:
            if not isinstance(alias, dict):
                continue
            if alias.get("name") == name and alias.get("mount_accessor") == mount_accessor:
                alias_id = alias.get("id")
                if alias_id:
                    return alias_id

    raise ResourceNotFoundError(
        f"unable to determine alias ID. canonical ID: {canonical_id!r}  "
        f"name: {name!r}  mountAccessor: {mount_accessor!r}"
    )


class IdentityEntityAlias(ResourceBlueprint):
    """Identity entity alias.

    Vault does not create a new alias when one with the same name and mount
    accessor already exists; it merges into the existing entity and answers
    with an empty body. :meth:`create` reports that case as an
    :class:`AmbiguousMergeError` naming the existing alias id when it can be
    found, so the caller can import it instead.
    """

    resource_type = RESOURCE_TYPE

    def create(self, data: ResourceData) -> None:
        validate_schema(RESOURCE_TYPE, data.attributes)
        name = data.get("name")
        mount_accessor = data.get("mount_accessor")
        canonical_id = data.get("canonical_id")

        payload: dict[str, Any] = {
            "name": name,
            "mount_accessor": mount_accessor,
            "canonical_id": canonical_id,
            "custom_metadata": data.get("custom_metadata") or {},
        }

        try:
            response = self.client.write(ENTITY_ALIAS_PATH, payload)
        except RemoteError as e:
            raise type(e)(
                f"error writing IdentityEntityAlias to {name!r}: {e}", path=ENTITY_ALIAS_PATH
            ) from e

        alias_id = ((response or {}).get("data") or {}).get("id")
        if not alias_id:
            self._raise_merged(name, mount_accessor, canonical_id)

        vj_logger.debug(
            f"Wrote IdentityEntityAlias {name!r}",
            resource=RESOURCE_TYPE, operation="create", path=ENTITY_ALIAS_PATH,
        )
        data.set_id(alias_id)
        self.read(data)

    def _raise_merged(self, name: str, mount_accessor: str, canonical_id: str) -> NoReturn:
        alias_id = None
        message = "Unable to determine alias id."
        try:
            alias_id = find_alias_id(self.client, canonical_id, name, mount_accessor)
        except (ResourceNotFoundError, RemoteError) as e:
            vj_logger.warning(
                f"Could not recover id of merged IdentityEntityAlias {name!r}: {e}",
                resource=RESOURCE_TYPE, operation="create",
            )
        else:
            message = f"Alias resource ID {alias_id!r} may be imported."
        raise AmbiguousMergeError(
            f"IdentityEntityAlias {name!r} already exists. {message}", alias_id=alias_id
        )

    def update(self, data: ResourceData) -> None:
        alias_id = data.id
        path = entity_alias_id_path(alias_id)
        vj_logger.debug(
            f"Updating IdentityEntityAlias {alias_id!r}",
            resource=RESOURCE_TYPE, operation="update", path=path,
        )

        try:
            response = self.client.read(path)
        except RemoteError as e:
            raise type(e)(f"error updating IdentityEntityAlias {alias_id!r}: {e}", path=path) from e
        if response is None:
            data.set_id("")
            raise ResourceNotFoundError(f"IdentityEntityAlias {alias_id!r} not found")

        current = response.get("data") or {}
        payload: dict[str, Any] = {field: current.get(field) for field in _ALIAS_FIELDS}
        for field in _ALIAS_FIELDS:
            value = data.get_ok(field)
            if value is not None:
                payload[field] = value
        payload["custom_metadata"] = data.get("custom_metadata") or {}
        validate_schema(RESOURCE_TYPE, payload)

        try:
            self.client.write(path, payload)
        except RemoteError as e:
            raise type(e)(f"error updating IdentityEntityAlias {alias_id!r}: {e}", path=path) from e
        vj_logger.debug(
            f"Updated IdentityEntityAlias {alias_id!r}",
            resource=RESOURCE_TYPE, operation="update", path=path,
        )

        self.read(data)

    def read(self, data: ResourceData) -> None:
        alias_id = data.id
        path = entity_alias_id_path(alias_id)

        vj_logger.debug(
            f"Reading IdentityEntityAlias {alias_id} from {path!r}",
            resource=RESOURCE_TYPE, operation="read", path=path,
        )
        try:
            response = self.client.read(path)
        except RemoteError as e:
            raise type(e)(f"error reading IdentityEntityAlias {alias_id!r}: {e}", path=path) from e

        if response is None:
            vj_logger.warning(
                f"IdentityEntityAlias {alias_id!r} not found, removing from state",
                resource=RESOURCE_TYPE, operation="read", path=path,
            )
            data.set_id("")
            return

        remote = response.get("data") or {}
        data.set_id(remote.get("id") or alias_id)
        for field in _ALIAS_FIELDS:
            data.set(field, remote.get(field))
        data.set("custom_metadata", remote.get("custom_metadata") or {})

    def delete(self, data: ResourceData) -> None:
        alias_id = data.id
        path = entity_alias_id_path(alias_id)

        vj_logger.debug(
            f"Deleting IdentityEntityAlias {alias_id!r}",
            resource=RESOURCE_TYPE, operation="delete", path=path,
        )
        try:
            self.client.delete(path)
        except RemoteError as e:
            raise type(e)(
                f"error deleting IdentityEntityAlias {alias_id!r}: {e}", path=path
            ) from e
        vj_logger.debug(
            f"Deleted IdentityEntityAlias {alias_id!r}",
            resource=RESOURCE_TYPE, operation="delete", path=path,
        )

    def exists(self, data: ResourceData) -> bool:
        key = data.id
        path = entity_alias_id_path(key)
        # use the name if no ID is set
        if not key:
            key = data.get("name") or ""
            path = entity_alias_name_path(key)

        vj_logger.debug(
            f"Checking if IdentityEntityAlias {key!r} exists",
            resource=RESOURCE_TYPE, operation="exists", path=path,
        )
        try:
            response = self.client.read(path)
        except RemoteError as e:
            raise type(e)(
                f"error checking if IdentityEntityAlias {key!r} exists: {e}", path=path
            ) from e
        return response is not None
