"""Serializer registry and registration decorator.

This module provides the central registry for all type serializers.
Serializers are registered using the @register_serializer decorator, which
instantiates the class and binds it to the value type it handles.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from textconf.errors import SerializerNotFoundError

if TYPE_CHECKING:
    from textconf.config.node import ConfigNode

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=type)


class TypeSerializer(Protocol):
    """Maps values of one type to and from a configuration node."""

    def deserialize(self, type_: type, node: "ConfigNode") -> Any: ...

    def serialize(self, type_: type, obj: Any, node: "ConfigNode") -> None: ...


@dataclass(frozen=True)
class SerializerDefinition:
    """A registered serializer and the type it handles."""

    value_type: type
    serializer: TypeSerializer
    description: str = ""


class SerializerRegistry:
    """Singleton registry for all type serializers.

    Serializers are registered via the @register_serializer decorator.
    Lookup walks the requested type's MRO, so a serializer registered for
    a base class also handles its subclasses.
    """

    _instance: "SerializerRegistry | None" = None
    _serializers: dict[type, SerializerDefinition]

    def __new__(cls) -> "SerializerRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._serializers = {}
        return cls._instance

    def register(
        self,
        value_type: type,
        serializer: TypeSerializer,
        description: str = "",
    ) -> None:
        """Register a serializer for a value type."""
        if value_type in self._serializers:
            logger.warning(
                "[REGISTRY] Serializer for '%s' already registered, overwriting",
                value_type.__name__,
            )
        self._serializers[value_type] = SerializerDefinition(
            value_type=value_type,
            serializer=serializer,
            description=description,
        )
        logger.debug("[REGISTRY] Registered serializer: %s", value_type.__name__)

    def get(self, value_type: type) -> TypeSerializer | None:
        """Get the serializer for a type or its nearest registered base."""
        for candidate in getattr(value_type, "__mro__", (value_type,)):
            definition = self._serializers.get(candidate)
            if definition is not None:
                return definition.serializer
        return None

    def require(self, value_type: type) -> TypeSerializer:
        """Get the serializer for a type, raising if none is registered."""
        serializer = self.get(value_type)
        if serializer is None:
            raise SerializerNotFoundError(
                f"No serializer registered for type '{getattr(value_type, '__name__', value_type)}'"
            )
        return serializer

    def all_serializers(self) -> list[SerializerDefinition]:
        """Get all registered serializers."""
        return list(self._serializers.values())

    def count(self) -> int:
        return len(self._serializers)

    def unregister(self, value_type: type) -> None:
        """Remove a serializer (for testing)."""
        self._serializers.pop(value_type, None)


def register_serializer(
    value_type: type,
    description: str = "",
) -> Callable[[S], S]:
    """Decorator to register a serializer class for a value type.

    Usage:
        @register_serializer(TextTemplate, description="Text templates")
        class TextTemplateSerializer:
            def deserialize(self, type_, node): ...
            def serialize(self, type_, obj, node): ...

    The class is instantiated with no arguments at registration time.
    """

    def decorator(cls: S) -> S:
        SerializerRegistry().register(value_type, cls(), description)
        return cls

    return decorator


def get_registry() -> SerializerRegistry:
    """Get the singleton serializer registry."""
    return SerializerRegistry()
