"""Tests for placeholder matching of stored text fragments.

A fragment is an argument reference only when it is a childless literal,
wrapped in the configured delimiters, and its name is declared.
"""

import pytest

from textconf.core import TextFormat, composite, literal
from textconf.serializers.matching import (
    NOT_ARG,
    ArgMatch,
    UndeclaredBracketed,
    classify,
    is_bracketed,
    unwrap,
)

# ---------------------------------------------------------------------------
# unwrap / is_bracketed
# ---------------------------------------------------------------------------


class TestUnwrap:
    """unwrap() strips a fixed number of characters from each end."""

    def test_default_braces(self):
        assert unwrap("{player}") == "player"

    def test_multi_char_delimiters(self):
        assert unwrap("<<player>>", "<<", ">>") == "player"

    def test_nested_delimiters_kept_verbatim(self):
        assert unwrap("{{player}}") == "{player}"

    def test_empty_interior(self):
        assert unwrap("{}") == ""

    def test_empty_delimiters_return_whole_content(self):
        assert unwrap("player", "", "") == "player"


class TestIsBracketed:
    """is_bracketed() needs both delimiters and enough room for them."""

    @pytest.mark.parametrize(
        "content",
        ["{player}", "{}", "{a b c}", "{{x}}"],
    )
    def test_bracketed(self, content):
        assert is_bracketed(content) is True

    @pytest.mark.parametrize(
        "content",
        ["player", "{player", "player}", " {player}", "{player} ", "", "{", "}"],
    )
    def test_not_bracketed(self, content):
        assert is_bracketed(content) is False

    def test_shared_delimiter_character_too_short(self):
        """A single '%' must not count as both open and close."""
        assert is_bracketed("%", "%", "%") is False

    def test_multi_char_shared_delimiter_too_short(self):
        assert is_bracketed("%%%", "%%", "%%") is False


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    """classify() returns NotArg, UndeclaredBracketed or ArgMatch."""

    def test_declared_name_matches(self):
        assert classify(literal("{player}"), {"player"}) == ArgMatch("player")

    def test_undeclared_name_is_bracketed_only(self):
        assert classify(literal("{foo}"), {"player"}) == UndeclaredBracketed("foo")

    def test_plain_text_is_not_arg(self):
        assert classify(literal("Hello "), {"player"}) is NOT_ARG

    def test_node_with_children_is_never_arg(self):
        node = literal("{player}", children=[literal("x")])
        assert classify(node, {"player"}) is NOT_ARG

    def test_composite_is_never_arg(self):
        assert classify(composite(literal("{player}")), {"player"}) is NOT_ARG

    def test_format_does_not_affect_matching(self):
        node = literal("{player}", TextFormat(color="gold"))
        assert classify(node, {"player"}) == ArgMatch("player")

    def test_custom_delimiters(self):
        assert classify(literal("<player>"), {"player"}, "<", ">") == ArgMatch("player")

    def test_default_braces_ignored_with_custom_delimiters(self):
        assert classify(literal("{player}"), {"player"}, "<", ">") is NOT_ARG

    def test_nested_braces_name_includes_inner_braces(self):
        assert classify(literal("{{player}}"), {"player"}) == UndeclaredBracketed("{player}")
        assert classify(literal("{{player}}"), {"{player}"}) == ArgMatch("{player}")

    def test_too_short_for_delimiters(self):
        assert classify(literal("%"), {""}, "%", "%") is NOT_ARG
        assert classify(literal("{"), {""}) is NOT_ARG

    def test_empty_name_when_declared(self):
        assert classify(literal("{}"), {""}) == ArgMatch("")

    def test_accepts_any_collection_of_names(self):
        assert classify(literal("{a}"), ["a", "b"]) == ArgMatch("a")
        assert classify(literal("{a}"), {"a": False}) == ArgMatch("a")


class TestPermissiveDelimiters:
    """Equal or empty delimiters are used as configured, not rejected."""

    def test_equal_delimiters(self):
        assert classify(literal("%player%"), {"player"}, "%", "%") == ArgMatch("player")

    def test_equal_delimiters_zero_length_name(self):
        assert classify(literal("%%"), {""}, "%", "%") == ArgMatch("")

    def test_empty_delimiters_match_whole_content(self):
        assert classify(literal("player"), {"player"}, "", "") == ArgMatch("player")
        assert classify(literal("other"), {"player"}, "", "") == UndeclaredBracketed("other")
