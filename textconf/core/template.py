"""Text templates: styled text with named placeholder arguments.

Usage:
    from textconf.core import TextTemplate, arg, TextFormat

    template = TextTemplate.of(
        "Hello ",
        arg("player", format=TextFormat(color="gold")),
        "!",
    )
    template.arguments  # {"player": Arg(name="player", ...)}
    template.to_text()  # LiteralText("") with three children

Elements passed to TextTemplate.of() are interpreted in order:

- TextFormat: sets the format for following plain strings
- str: becomes a LiteralText in the current format
- Text: appended unchanged
- Arg: a placeholder, rendered as open_arg + name + close_arg
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias, Union

from textconf.core.types import LiteralText, Text, TextFormat, literal

logger = logging.getLogger(__name__)

DEFAULT_OPEN_ARG = "{"
DEFAULT_CLOSE_ARG = "}"


@dataclass(frozen=True)
class Arg:
    """A named placeholder slot in a template."""

    name: str
    format: TextFormat = TextFormat.NONE
    optional: bool = False

    def render(self, open_arg: str, close_arg: str) -> LiteralText:
        return literal(f"{open_arg}{self.name}{close_arg}", self.format)


def arg(
    name: str,
    optional: bool = False,
    format: TextFormat = TextFormat.NONE,
) -> Arg:
    """Build a placeholder argument."""
    return Arg(name=name, format=format, optional=optional)


Element: TypeAlias = Union[TextFormat, Text, Arg, str]


def _check_delimiters(open_arg: str, close_arg: str) -> None:
    # Accepted as configured; matching still runs against them
    if not open_arg or not close_arg:
        logger.warning("[TEMPLATE] Empty argument delimiter: open=%r close=%r", open_arg, close_arg)
    elif open_arg == close_arg:
        logger.warning("[TEMPLATE] Identical argument delimiters: %r", open_arg)
    elif open_arg in close_arg or close_arg in open_arg:
        logger.warning(
            "[TEMPLATE] Overlapping argument delimiters: open=%r close=%r", open_arg, close_arg
        )


@dataclass(frozen=True, eq=False)
class TextTemplate:
    """Immutable sequence of template elements plus its argument delimiters.

    Two templates are equal when they render the same text tree, declare the
    same arguments and use the same delimiters.
    """

    elements: tuple[Element, ...] = ()
    open_arg: str = DEFAULT_OPEN_ARG
    close_arg: str = DEFAULT_CLOSE_ARG
    _arguments: dict[str, Arg] = field(default_factory=dict, init=False, repr=False)
    _text: Text | None = field(default=None, init=False, repr=False)

    EMPTY: ClassVar["TextTemplate"]

    def __post_init__(self) -> None:
        _check_delimiters(self.open_arg, self.close_arg)
        arguments: dict[str, Arg] = {}
        root_format = TextFormat.NONE
        current_format = TextFormat.NONE
        leading = True
        rendered: list[Text] = []

        for element in self.elements:
            if isinstance(element, TextFormat):
                current_format = element
                if leading:
                    root_format = element
                continue

            leading = False
            if isinstance(element, Arg):
                existing = arguments.get(element.name)
                if existing is not None and existing.optional != element.optional:
                    raise ValueError(
                        f"Argument '{element.name}' declared both optional and required"
                    )
                arguments.setdefault(element.name, element)
                rendered.append(element.render(self.open_arg, self.close_arg))
            elif isinstance(element, Text):
                rendered.append(element)
            elif isinstance(element, str):
                rendered.append(literal(element, current_format))
            else:
                raise TypeError(f"Unsupported template element: {type(element).__name__}")

        object.__setattr__(self, "_arguments", arguments)
        object.__setattr__(self, "_text", literal("", root_format, rendered))

    @classmethod
    def of(
        cls,
        *elements: Element,
        open_arg: str = DEFAULT_OPEN_ARG,
        close_arg: str = DEFAULT_CLOSE_ARG,
    ) -> "TextTemplate":
        """Create a template from an ordered element sequence."""
        return cls(elements=tuple(elements), open_arg=open_arg, close_arg=close_arg)

    @classmethod
    def from_elements(
        cls,
        elements: Iterable[Element],
        open_arg: str = DEFAULT_OPEN_ARG,
        close_arg: str = DEFAULT_CLOSE_ARG,
    ) -> "TextTemplate":
        return cls.of(*elements, open_arg=open_arg, close_arg=close_arg)

    @property
    def arguments(self) -> dict[str, Arg]:
        """Declared arguments by name, in first-seen order."""
        return dict(self._arguments)

    def to_text(self) -> Text:
        """Render the template to a text tree with placeholders left in place."""
        return self._text

    def _key(self) -> tuple:
        # Declaration order is not part of a template's identity
        return (self._text, frozenset(self._arguments.items()), self.open_arg, self.close_arg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextTemplate):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


TextTemplate.EMPTY = TextTemplate()
