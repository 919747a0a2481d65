"""TextTemplate serializer.

A template is stored in two parts:

- "arguments": the declared arguments, name -> {"optional": bool}
- "content": the template rendered as a text tree, with every argument
  shown as open_arg + name + close_arg in the argument's format

Non-default delimiters are also stored under "openArg" / "closeArg".

Deserialization decodes "content" and inspects the root node and its
direct children. A childless literal fragment wrapped in the delimiters
whose name is declared under "arguments" becomes an Arg carrying the
fragment's format; every other child is kept as literal text.
"""

import logging
from collections.abc import Iterator, Mapping

from textconf.config.node import ConfigNode
from textconf.core.template import (
    DEFAULT_CLOSE_ARG,
    DEFAULT_OPEN_ARG,
    Arg,
    Element,
    TextTemplate,
)
from textconf.core.types import Text
from textconf.errors import CodecError, TypeCoercionError
from textconf.serializers.matching import ArgMatch, UndeclaredBracketed, classify
from textconf.serializers.registry import register_serializer
from textconf.serializers.text import TextCodec

logger = logging.getLogger(__name__)

NODE_OPEN_ARG = "openArg"
NODE_CLOSE_ARG = "closeArg"
NODE_CONTENT = "content"
NODE_ARGS = "arguments"
NODE_OPT = "optional"


class DeclarationTable(Mapping[str, bool]):
    """Declared arguments as name -> optional, read from an "arguments" node.

    Membership only needs the declaration to exist. The optional flag is
    coerced when a name is looked up, so a malformed flag on an argument the
    content never references does not fail the template.
    """

    def __init__(self, declarations: dict[str, ConfigNode]):
        self._declarations = declarations

    def __getitem__(self, name: str) -> bool:
        return self._declarations[name].node(NODE_OPT).get_bool(False)

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)


def read_declarations(node: ConfigNode) -> DeclarationTable:
    """Read the declared arguments of a template node."""
    args_node = node.node(NODE_ARGS)
    if args_node.is_virtual():
        return DeclarationTable({})
    if not args_node.is_map():
        raise TypeCoercionError(args_node.path, "mapping", args_node.raw())
    return DeclarationTable(
        {name: child for name, child in args_node.children().items() if not child.is_virtual()}
    )


def build_elements(
    content: Text,
    declarations: Mapping[str, bool],
    open_arg: str = DEFAULT_OPEN_ARG,
    close_arg: str = DEFAULT_CLOSE_ARG,
) -> list[Element]:
    """Rebuild template elements from a rendered tree.

    Only the root and its direct children are matched.
    """

    def to_arg(source: Text, name: str) -> Arg:
        return Arg(name=name, format=source.format, optional=declarations[name])

    elements: list[Element] = [content.format]
    match = classify(content, declarations, open_arg, close_arg)
    if isinstance(match, ArgMatch):
        elements.append(to_arg(content, match.name))

    for child in content.children:
        match = classify(child, declarations, open_arg, close_arg)
        if isinstance(match, ArgMatch):
            elements.append(to_arg(child, match.name))
        else:
            if isinstance(match, UndeclaredBracketed):
                logger.debug("[TEMPLATE] Undeclared argument '%s' kept as literal text", match.name)
            elements.append(child)
    return elements


@register_serializer(TextTemplate, description="Text templates with arguments")
class TextTemplateSerializer:
    """Maps TextTemplate values to and from configuration nodes."""

    def __init__(self, codec: TextCodec | None = None):
        self._codec = codec or TextCodec()

    def deserialize(self, type_: type, node: ConfigNode) -> TextTemplate:
        open_arg = node.node(NODE_OPEN_ARG).get_string(DEFAULT_OPEN_ARG)
        close_arg = node.node(NODE_CLOSE_ARG).get_string(DEFAULT_CLOSE_ARG)

        content_node = node.node(NODE_CONTENT)
        if content_node.is_virtual():
            raise CodecError(f"Missing '{NODE_CONTENT}' at '{'.'.join(node.path) or '<root>'}'")
        content = self._codec.decode(content_node.raw())

        declarations = read_declarations(node)
        elements = build_elements(content, declarations, open_arg, close_arg)
        logger.debug(
            "[TEMPLATE] Deserialized %d elements, %d declared arguments",
            len(elements),
            len(declarations),
        )
        return TextTemplate.from_elements(elements, open_arg=open_arg, close_arg=close_arg)

    def serialize(self, type_: type, obj: TextTemplate, node: ConfigNode) -> None:
        args_node = node.node(NODE_ARGS)
        args_node.set_value({})
        for name, argument in obj.arguments.items():
            args_node.node(name, NODE_OPT).set_value(argument.optional)

        node.node(NODE_CONTENT).set_value(self._codec.encode(obj.to_text()))

        if obj.open_arg != DEFAULT_OPEN_ARG:
            node.node(NODE_OPEN_ARG).set_value(obj.open_arg)
        else:
            node.node(NODE_OPEN_ARG).remove()
        if obj.close_arg != DEFAULT_CLOSE_ARG:
            node.node(NODE_CLOSE_ARG).set_value(obj.close_arg)
        else:
            node.node(NODE_CLOSE_ARG).remove()


def deserialize_template(node: ConfigNode) -> TextTemplate | None:
    """Read a TextTemplate from a configuration node. Virtual nodes yield None."""
    return node.get_value(TextTemplate)


def serialize_template(template: TextTemplate, node: ConfigNode) -> ConfigNode:
    """Write a TextTemplate into a configuration node."""
    return node.set_value_as(TextTemplate, template)
