"""Hierarchical configuration document.

A ConfigNode is a handle on one path inside a shared document tree. Handles
for paths that were never written are "virtual": they read as absent and
materialize on the first set_value().

Usage:
    root = ConfigNode({"content": {"text": "hi"}})
    root.node("content", "text").get_string()      # "hi"
    root.node("arguments", "player").is_virtual()  # True
    root.node("arguments", "player", "optional").set_value(True)
"""

import copy
from typing import Any

from pydantic import ConfigDict, TypeAdapter, ValidationError

from textconf.errors import TypeCoercionError

_MISSING = object()

_BOOL = TypeAdapter(bool)
_STR = TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True))


class _Document:
    """Mutable root value shared by every node handle of one document."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value


class ConfigNode:
    """Handle on a path within a configuration document."""

    def __init__(
        self,
        value: Any = _MISSING,
        *,
        _document: _Document | None = None,
        _path: tuple[str, ...] = (),
    ):
        if _document is None:
            _document = _Document(copy.deepcopy(value) if value is not _MISSING else _MISSING)
        self._document = _document
        self._path = _path

    # =========================================================================
    # Navigation
    # =========================================================================

    @property
    def path(self) -> tuple[str, ...]:
        return self._path

    @property
    def key(self) -> str | None:
        return self._path[-1] if self._path else None

    def node(self, *path: str) -> "ConfigNode":
        """Get a handle on a descendant path. Never fails; may be virtual."""
        return ConfigNode(_document=self._document, _path=self._path + tuple(str(p) for p in path))

    def parent(self) -> "ConfigNode | None":
        if not self._path:
            return None
        return ConfigNode(_document=self._document, _path=self._path[:-1])

    def root(self) -> "ConfigNode":
        return ConfigNode(_document=self._document)

    def _lookup(self) -> Any:
        value = self._document.value
        for segment in self._path:
            if not isinstance(value, dict) or segment not in value:
                return _MISSING
            value = value[segment]
        return value

    # =========================================================================
    # Reading
    # =========================================================================

    def is_virtual(self) -> bool:
        """True if nothing has been written at this path."""
        value = self._lookup()
        return value is _MISSING or value is None

    def is_map(self) -> bool:
        return isinstance(self._lookup(), dict)

    def raw(self) -> Any:
        """Get a copy of the raw stored value, or None if virtual."""
        value = self._lookup()
        if value is _MISSING:
            return None
        return copy.deepcopy(value)

    def children(self) -> dict[str, "ConfigNode"]:
        """Child handles of a mapping node, in insertion order."""
        value = self._lookup()
        if not isinstance(value, dict):
            return {}
        return {key: self.node(key) for key in value}

    def get_string(self, default: str = "") -> str:
        if self.is_virtual():
            return default
        value = self._lookup()
        if isinstance(value, bool):
            return "true" if value else "false"
        try:
            return _STR.validate_python(value)
        except ValidationError as e:
            raise TypeCoercionError(self._path, "string", value) from e

    def get_bool(self, default: bool = False) -> bool:
        if self.is_virtual():
            return default
        value = self._lookup()
        try:
            return _BOOL.validate_python(value)
        except ValidationError as e:
            raise TypeCoercionError(self._path, "boolean", value) from e

    def get_value(self, value_type: type, default: Any = None) -> Any:
        """Deserialize this node through the serializer registered for value_type."""
        if self.is_virtual():
            return default
        from textconf.serializers import get_registry

        return get_registry().require(value_type).deserialize(value_type, self)

    # =========================================================================
    # Writing
    # =========================================================================

    def set_value(self, value: Any) -> "ConfigNode":
        """Store a raw value at this path, creating parents as needed.

        Setting None removes the node.
        """
        if value is None:
            self.remove()
            return self
        value = copy.deepcopy(value)
        if not self._path:
            self._document.value = value
            return self

        if not isinstance(self._document.value, dict):
            self._document.value = {}
        container = self._document.value
        for segment in self._path[:-1]:
            child = container.get(segment)
            if not isinstance(child, dict):
                child = {}
                container[segment] = child
            container = child
        container[self._path[-1]] = value
        return self

    def set_value_as(self, value_type: type, obj: Any) -> "ConfigNode":
        """Serialize obj into this node through the serializer registered for value_type."""
        if obj is None:
            self.remove()
            return self
        from textconf.serializers import get_registry

        get_registry().require(value_type).serialize(value_type, obj, self)
        return self

    def remove(self) -> bool:
        """Remove this node. Returns True if something was removed."""
        if not self._path:
            removed = self._document.value is not _MISSING
            self._document.value = _MISSING
            return removed
        parent = self.parent()._lookup()
        if isinstance(parent, dict) and self._path[-1] in parent:
            del parent[self._path[-1]]
            return True
        return False

    def __repr__(self) -> str:
        return f"ConfigNode(path={'.'.join(self._path) or '<root>'}, value={self.raw()!r})"
