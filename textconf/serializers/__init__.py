"""Type serializers for configuration documents.

Usage:
    from textconf.config import ConfigNode
    from textconf.core import TextTemplate

    template = node.get_value(TextTemplate)
    node.set_value_as(TextTemplate, template)

Importing this package registers the built-in serializers.
"""

from textconf.serializers.matching import (
    NOT_ARG,
    ArgMatch,
    MatchResult,
    NotArg,
    UndeclaredBracketed,
    classify,
    is_bracketed,
    unwrap,
)
from textconf.serializers.registry import (
    SerializerDefinition,
    SerializerRegistry,
    TypeSerializer,
    get_registry,
    register_serializer,
)
from textconf.serializers.template import (
    DeclarationTable,
    TextTemplateSerializer,
    build_elements,
    deserialize_template,
    read_declarations,
    serialize_template,
)
from textconf.serializers.text import TextCodec, TextComponent, TextSerializer

__all__ = [
    # Matching
    "NOT_ARG",
    "ArgMatch",
    "MatchResult",
    "NotArg",
    "UndeclaredBracketed",
    "classify",
    "is_bracketed",
    "unwrap",
    # Registry
    "SerializerDefinition",
    "SerializerRegistry",
    "TypeSerializer",
    "get_registry",
    "register_serializer",
    # Serializers
    "TextCodec",
    "TextComponent",
    "TextSerializer",
    "DeclarationTable",
    "TextTemplateSerializer",
    "build_elements",
    "deserialize_template",
    "read_declarations",
    "serialize_template",
]
