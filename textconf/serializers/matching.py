"""Placeholder matching for stored text fragments.

A fragment is a placeholder reference when it is a childless LiteralText
whose content is open_arg + name + close_arg and name is a declared
argument. Bracketed fragments with undeclared names stay literal text.
"""

from collections.abc import Collection
from dataclasses import dataclass
from typing import TypeAlias

from textconf.core.template import DEFAULT_CLOSE_ARG, DEFAULT_OPEN_ARG
from textconf.core.types import LiteralText, Text


@dataclass(frozen=True)
class NotArg:
    """Fragment is not bracketed, or is not an eligible leaf."""


@dataclass(frozen=True)
class UndeclaredBracketed:
    """Fragment is bracketed but names no declared argument."""

    name: str


@dataclass(frozen=True)
class ArgMatch:
    """Fragment references the declared argument `name`."""

    name: str


MatchResult: TypeAlias = NotArg | UndeclaredBracketed | ArgMatch

NOT_ARG = NotArg()


def is_bracketed(
    content: str,
    open_arg: str = DEFAULT_OPEN_ARG,
    close_arg: str = DEFAULT_CLOSE_ARG,
) -> bool:
    """True if content starts with open_arg and ends with close_arg.

    Content shorter than both delimiters together never matches, so the
    delimiters cannot overlap inside it.
    """
    return (
        len(content) >= len(open_arg) + len(close_arg)
        and content.startswith(open_arg)
        and content.endswith(close_arg)
    )


def unwrap(
    content: str,
    open_arg: str = DEFAULT_OPEN_ARG,
    close_arg: str = DEFAULT_CLOSE_ARG,
) -> str:
    """Strip exactly one open_arg prefix and one close_arg suffix."""
    return content[len(open_arg) : len(content) - len(close_arg)]


def classify(
    node: Text,
    declared_names: Collection[str],
    open_arg: str = DEFAULT_OPEN_ARG,
    close_arg: str = DEFAULT_CLOSE_ARG,
) -> MatchResult:
    """Decide whether a text node is a declared placeholder reference."""
    if not isinstance(node, LiteralText) or node.children:
        return NOT_ARG
    content = node.content
    if not is_bracketed(content, open_arg, close_arg):
        return NOT_ARG
    name = unwrap(content, open_arg, close_arg)
    if name in declared_names:
        return ArgMatch(name)
    return UndeclaredBracketed(name)
