"""Declarative resource state.

A :class:`ResourceData` carries the locally held description of a resource:
its identity (the remote id or path) and its attributes. Resources read the
desired values from it and write the last-known remote values back into it.
"""

from __future__ import annotations

from typing import Any

# Values that count as "not set" in a declarative description.
_ZERO_VALUES: tuple[Any, ...] = (None, "", 0, False)


class ResourceData:
    """Mutable declarative state for one resource instance.

    Attributes:
        attributes: Attribute name to value mapping.
    """

    def __init__(self, attributes: dict[str, Any] | None = None, id: str = "") -> None:
        self.attributes: dict[str, Any] = dict(attributes or {})
        self._id = id

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, attributes={self.attributes!r})"

    @property
    def id(self) -> str:
        """The resource identity; an empty string means no remote object."""
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value or ""

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def get_ok(self, key: str) -> Any:
        """Return the value of *key* if it is set to a non-zero value, else ``None``.

        Empty strings, ``0``, ``False`` and empty collections all count as unset.
        """
        value = self.attributes.get(key)
        if isinstance(value, (dict, list, tuple, set)):
            return value if value else None
        if value in _ZERO_VALUES:
            return None
        return value

    def is_set(self, key: str) -> bool:
        return self.get_ok(key) is not None

    def set(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Return the attributes together with the identity under ``id``."""
        return {"id": self._id, **self.attributes}
