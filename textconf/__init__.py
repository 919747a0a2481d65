"""textconf - rich-text templates stored in configuration documents.

Usage:
    from textconf import ConfigNode, TextTemplate, arg

    template = TextTemplate.of("Hello ", arg("player"), "!")
    node = ConfigNode()
    node.set_value_as(TextTemplate, template)
    assert node.get_value(TextTemplate) == template
"""

from textconf.config import ConfigNode, dumps_json, load_json, loads_json, save_json
from textconf.core import (
    Arg,
    CompositeText,
    LiteralText,
    Text,
    TextFormat,
    TextStyle,
    TextTemplate,
    arg,
    composite,
    literal,
)
from textconf.errors import (
    CodecError,
    MappingError,
    SerializerNotFoundError,
    TypeCoercionError,
)

__all__ = [
    # Text and templates
    "Arg",
    "CompositeText",
    "LiteralText",
    "Text",
    "TextFormat",
    "TextStyle",
    "TextTemplate",
    "arg",
    "composite",
    "literal",
    # Documents
    "ConfigNode",
    "dumps_json",
    "load_json",
    "loads_json",
    "save_json",
    # Errors
    "CodecError",
    "MappingError",
    "SerializerNotFoundError",
    "TypeCoercionError",
]

# Register the built-in serializers
from textconf import serializers  # noqa: E402, F401
