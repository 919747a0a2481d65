"""Core rich-text types for textconf.

All text values are immutable dataclasses with attribute access.
A text tree is a tagged union of node variants:

- LiteralText: a node with its own literal content (may also have children)
- CompositeText: a pure container with no content of its own

A node's own content is rendered before its children, depth-first.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar

# Named colors accepted by the rich-text component format
COLORS = frozenset(
    {
        "black",
        "dark_blue",
        "dark_green",
        "dark_aqua",
        "dark_red",
        "dark_purple",
        "gold",
        "gray",
        "dark_gray",
        "blue",
        "green",
        "aqua",
        "red",
        "light_purple",
        "yellow",
        "white",
        "reset",
    }
)

STYLE_FLAGS = ("bold", "italic", "underlined", "strikethrough", "obfuscated")


@dataclass(frozen=True)
class TextStyle:
    """Style flags for a text node.

    Each flag is tri-state: True/False set it explicitly, None inherits
    from the parent node.
    """

    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None

    NONE: ClassVar["TextStyle"]


TextStyle.NONE = TextStyle()


@dataclass(frozen=True)
class TextFormat:
    """Styling descriptor attached to a text node: color plus style."""

    color: str | None = None
    style: TextStyle = TextStyle.NONE

    NONE: ClassVar["TextFormat"]


TextFormat.NONE = TextFormat()


@dataclass(frozen=True)
class Text:
    """Base text node. Use LiteralText or CompositeText.

    `extras` holds component keys this model does not interpret (click and
    hover events, translation keys, ...). They compare but are not hashed.
    """

    format: TextFormat = TextFormat.NONE
    children: tuple["Text", ...] = field(default_factory=tuple)
    extras: dict[str, Any] = field(default_factory=dict, hash=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "extras", dict(self.extras))

    @property
    def content(self) -> str:
        return ""

    def to_plain(self) -> str:
        """Concatenate all literal content in render order."""
        return self.content + "".join(child.to_plain() for child in self.children)


@dataclass(frozen=True)
class LiteralText(Text):
    """Text node carrying its own literal string."""

    literal: str = ""

    @property
    def content(self) -> str:
        return self.literal


@dataclass(frozen=True)
class CompositeText(Text):
    """Container node; only its children carry content."""


def literal(
    content: str,
    format: TextFormat = TextFormat.NONE,
    children: tuple[Text, ...] | list[Text] = (),
) -> LiteralText:
    """Build a LiteralText node."""
    return LiteralText(format=format, children=tuple(children), literal=content)


def composite(
    *children: Text,
    format: TextFormat = TextFormat.NONE,
) -> CompositeText:
    """Build a CompositeText node from children."""
    return CompositeText(format=format, children=tuple(children))
