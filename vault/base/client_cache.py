"""
Logical client cache (pooling).

Avoids creating redundant hvac sessions when resources for the same Vault
connection are requested multiple times via the resource factory.
"""

from __future__ import annotations

import hashlib
import json
import threading
from typing import Any, Callable

from .api import LogicalBlueprint
from .config import VaultConfig


class ClientCache:
    """Thread-safe, in-process cache of logical clients keyed by config hash."""

    _instance: ClientCache | None = None
    _cache: dict[str, LogicalBlueprint]
    _lock: threading.Lock

    def __new__(cls) -> ClientCache:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._cache = {}
            cls._instance._lock = threading.Lock()
        return cls._instance

    @staticmethod
    def _make_key(config: VaultConfig) -> str:
        """Produce a deterministic cache key from the connection config."""
        # Sort keys so field ordering doesn't affect the hash.
        serialised = json.dumps(config.model_dump(), sort_keys=True, default=str)
        return hashlib.sha256(serialised.encode()).hexdigest()

    def get_or_create(
        self,
        config: VaultConfig,
        factory: Callable[[VaultConfig], Any],
    ) -> LogicalBlueprint:
        """Return a cached logical client or create one via *factory*.

        Args:
            config: Validated Vault connection config.
            factory: Callable(config) that creates a new logical client.

        Returns:
            The cached (or newly-created) client.
        """
        key = self._make_key(config)
        with self._lock:
            if key not in self._cache:
                self._cache[key] = factory(config)
            return self._cache[key]

    def clear(self) -> None:
        """Flush all cached clients."""
        with self._lock:
            self._cache.clear()
