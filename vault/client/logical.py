"""hvac implementation of the Logical blueprint."""

from __future__ import annotations

from typing import Any, NoReturn

import hvac
from hvac import exceptions as hvac_exceptions
from requests.exceptions import RequestException

from vault.base.api import LogicalBlueprint
from vault.base.config import VaultConfig
from vault.base.exceptions import (
    RemoteError,
    RemotePathNotFoundError,
    PermissionDeniedError,
)

_ERROR_MAP: dict[type[Exception], type[RemoteError]] = {
    hvac_exceptions.InvalidPath: RemotePathNotFoundError,
    hvac_exceptions.Forbidden: PermissionDeniedError,
    hvac_exceptions.Unauthorized: PermissionDeniedError,
}


def _handle(e: Exception, msg: str, path: str) -> NoReturn:
    exc = next((v for k, v in _ERROR_MAP.items() if isinstance(e, k)), RemoteError)
    raise exc(f"{msg}: {e}", path=path) from e


def _normalize(path: str) -> str:
    return path.lstrip("/")


class Logical(LogicalBlueprint):
    """Vault logical API backed by :class:`hvac.Client`.

    ``hvac.Client.read`` already returns ``None`` for a 404, which is the
    "no object" answer resources expect. Writes that come back without a JSON
    body (HTTP 204) are reported as ``None`` as well.

    Attributes:
        client: hvac client used for every request.
    """

    def __init__(self, config: VaultConfig, client: hvac.Client | None = None) -> None:
        """Initialize the hvac client.

        Args:
            config: Vault configuration object.
                   Expected attributes:
                   - url: Vault address
                   - token: Vault token
                   - namespace: Optional Enterprise namespace
                   - verify: TLS verification flag
                   - timeout: Request timeout in seconds
            client: Pre-built hvac client; built from *config* when omitted.
        """
        self.client = client or hvac.Client(
            url=config.url,
            token=config.token,
            namespace=config.namespace,
            verify=config.verify,
            timeout=config.timeout,
        )

    def read(self, path: str) -> dict[str, Any] | None:
        try:
            response = self.client.read(_normalize(path))
        except (hvac_exceptions.VaultError, RequestException) as e:
            _handle(e, f"Failed to read {path!r}", path)
        return response if isinstance(response, dict) else None

    def write(self, path: str, data: dict[str, Any]) -> dict[str, Any] | None:
        try:
            response = self.client.write_data(_normalize(path), data=data)
        except (hvac_exceptions.VaultError, RequestException) as e:
            _handle(e, f"Failed to write {path!r}", path)
        return response if isinstance(response, dict) else None

    def delete(self, path: str) -> None:
        try:
            self.client.delete(_normalize(path))
        except (hvac_exceptions.VaultError, RequestException) as e:
            _handle(e, f"Failed to delete {path!r}", path)
