"""
Structured logging for Vaultjack.

Resource operations log one JSON object per line, tagged with the resource
type, the operation and the Vault path so a single reconcile can be followed
through a log aggregator. Every record gets a short ``request_id``.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any

_CONTEXT_KEYS = ("request_id", "resource", "operation", "path")


class StructuredFormatter(logging.Formatter):
    """Render a record and its resource context as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in _CONTEXT_KEYS
            if getattr(record, key, None) is not None
        )
        return json.dumps(entry)


class VaultjackLogger:
    """Logger for resource operations, writing JSON lines to stderr."""

    def __init__(self, name: str = "vaultjack") -> None:
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def log_operation(
        self,
        level: int,
        message: str,
        *,
        resource: str | None = None,
        operation: str | None = None,
        path: str | None = None,
    ) -> None:
        """Emit *message* at *level* with the resource context attached.

        Args:
            level: Logging level (e.g. logging.DEBUG).
            message: Human-readable message.
            resource: Resource type (e.g. 'identity_entity_alias').
            operation: Operation name (e.g. 'create').
            path: Vault path the operation targets.
        """
        extra = {
            "resource": resource,
            "operation": operation,
            "path": path,
            "request_id": uuid.uuid4().hex[:12],
        }
        self.logger.log(level, message, extra=extra)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.WARNING, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.DEBUG, message, **kwargs)


# Module-level singleton
vj_logger = VaultjackLogger()
