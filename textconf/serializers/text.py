"""Text codec: rich-text trees to and from JSON-shaped components.

Component format:
    {"text": "Hello ", "color": "gold", "bold": true, "extra": [...]}

- "text" present: LiteralText; absent: CompositeText
- "extra": ordered children, each a component or a bare string
- style flags are omitted when unset (inherit)
- any other keys are carried through unchanged
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from textconf.config.node import ConfigNode
from textconf.core.types import (
    COLORS,
    STYLE_FLAGS,
    CompositeText,
    LiteralText,
    Text,
    TextFormat,
    TextStyle,
    literal,
)
from textconf.errors import CodecError
from textconf.serializers.registry import register_serializer


class TextComponent(BaseModel):
    """Validated shape of one encoded text node."""

    # Keys such as translate, clickEvent and hoverEvent are kept as-is
    model_config = ConfigDict(extra="allow")

    text: str | None = None
    color: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    extra: list[Union["TextComponent", str]] | None = None

    @field_validator("color")
    @classmethod
    def known_color(cls, v: str | None) -> str | None:
        if v is not None and v not in COLORS:
            raise ValueError(f"unknown color '{v}'")
        return v


TextComponent.model_rebuild()


def _component_to_text(component: TextComponent | str) -> Text:
    if isinstance(component, str):
        return literal(component)

    fmt = TextFormat(
        color=component.color,
        style=TextStyle(
            bold=component.bold,
            italic=component.italic,
            underlined=component.underlined,
            strikethrough=component.strikethrough,
            obfuscated=component.obfuscated,
        ),
    )
    children = tuple(_component_to_text(child) for child in component.extra or ())
    extras = dict(component.model_extra or {})
    if component.text is None:
        return CompositeText(format=fmt, children=children, extras=extras)
    return LiteralText(format=fmt, children=children, extras=extras, literal=component.text)


def _text_to_dict(text: Text) -> dict[str, Any]:
    if not isinstance(text, Text):
        raise CodecError(f"Cannot encode {type(text).__name__} as text")

    data: dict[str, Any] = {}
    if isinstance(text, LiteralText):
        data["text"] = text.content
    if text.format.color is not None:
        data["color"] = text.format.color
    style = text.format.style
    for flag in STYLE_FLAGS:
        value = getattr(style, flag)
        if value is not None:
            data[flag] = value
    for key, value in text.extras.items():
        data.setdefault(key, value)
    if text.children:
        data["extra"] = [_text_to_dict(child) for child in text.children]
    return data


class TextCodec:
    """Encodes and decodes text trees. Failures raise CodecError."""

    def decode(self, raw: Any) -> Text:
        if isinstance(raw, str):
            return literal(raw)
        try:
            component = TextComponent.model_validate(raw)
        except ValidationError as e:
            raise CodecError(f"Malformed text component: {e}") from e
        return _component_to_text(component)

    def encode(self, text: Text) -> dict[str, Any]:
        data = _text_to_dict(text)
        try:
            TextComponent.model_validate(data)
        except ValidationError as e:
            raise CodecError(f"Text cannot be encoded: {e}") from e
        return data


@register_serializer(Text, description="Rich-text trees")
class TextSerializer:
    """Stores a text tree directly as a component mapping."""

    def __init__(self, codec: TextCodec | None = None):
        self._codec = codec or TextCodec()

    def deserialize(self, type_: type, node: ConfigNode) -> Text:
        return self._codec.decode(node.raw())

    def serialize(self, type_: type, obj: Text, node: ConfigNode) -> None:
        node.set_value(self._codec.encode(obj))
