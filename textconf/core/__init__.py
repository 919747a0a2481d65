"""Core types for textconf.

All text values and templates are frozen dataclasses with attribute access.
"""

from textconf.core.template import (
    DEFAULT_CLOSE_ARG,
    DEFAULT_OPEN_ARG,
    Arg,
    Element,
    TextTemplate,
    arg,
)
from textconf.core.types import (
    COLORS,
    CompositeText,
    LiteralText,
    Text,
    TextFormat,
    TextStyle,
    composite,
    literal,
)

__all__ = [
    # Text
    "COLORS",
    "CompositeText",
    "LiteralText",
    "Text",
    "TextFormat",
    "TextStyle",
    "composite",
    "literal",
    # Templates
    "DEFAULT_CLOSE_ARG",
    "DEFAULT_OPEN_ARG",
    "Arg",
    "Element",
    "TextTemplate",
    "arg",
]
