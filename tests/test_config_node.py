"""Tests for ConfigNode documents and JSON loading."""

import pytest

from textconf import ConfigNode, MappingError, TypeCoercionError
from textconf.config import dumps_json, load_json, loads_json, save_json


class TestNavigation:
    def test_existing_path(self):
        node = ConfigNode({"a": {"b": "c"}})
        assert node.node("a", "b").get_string() == "c"
        assert node.node("a", "b").path == ("a", "b")
        assert node.node("a", "b").key == "b"

    def test_missing_path_is_virtual(self):
        node = ConfigNode({"a": {}})
        assert node.node("a", "x", "y").is_virtual()
        assert node.node("a", "x", "y").raw() is None

    def test_path_through_scalar_is_virtual(self):
        assert ConfigNode({"a": 1}).node("a", "b").is_virtual()

    def test_null_is_virtual(self):
        assert ConfigNode({"a": None}).node("a").is_virtual()

    def test_empty_root(self):
        assert ConfigNode().is_virtual()

    def test_children_in_order(self):
        node = ConfigNode({"b": 1, "a": 2})
        assert list(node.children()) == ["b", "a"]
        assert ConfigNode({"a": 1}).node("a").children() == {}

    def test_parent_and_root(self):
        child = ConfigNode({"a": {"b": 1}}).node("a", "b")
        assert child.parent().path == ("a",)
        assert child.root().path == ()
        assert child.root().parent() is None


class TestReading:
    def test_get_string_default(self):
        assert ConfigNode().node("x").get_string("{") == "{"

    def test_get_string_coerces_numbers(self):
        assert ConfigNode({"x": 5}).node("x").get_string() == "5"

    def test_get_string_bool(self):
        assert ConfigNode({"x": True}).node("x").get_string() == "true"

    def test_get_string_rejects_mapping(self):
        with pytest.raises(TypeCoercionError):
            ConfigNode({"x": {"y": 1}}).node("x").get_string()

    @pytest.mark.parametrize(
        "raw,expected",
        [(True, True), (False, False), ("true", True), ("no", False), (1, True), (0, False)],
    )
    def test_get_bool(self, raw, expected):
        assert ConfigNode({"x": raw}).node("x").get_bool() is expected

    def test_get_bool_default(self):
        assert ConfigNode().node("x").get_bool() is False
        assert ConfigNode().node("x").get_bool(True) is True

    @pytest.mark.parametrize("raw", ["maybe", [True], {"a": 1}])
    def test_get_bool_rejects(self, raw):
        with pytest.raises(TypeCoercionError) as exc_info:
            ConfigNode({"x": raw}).node("x").get_bool()
        assert exc_info.value.path == ("x",)
        assert isinstance(exc_info.value, MappingError)

    def test_raw_is_a_copy(self):
        node = ConfigNode({"a": {"b": 1}})
        node.node("a").raw()["b"] = 2
        assert node.node("a", "b").raw() == 1

    def test_constructor_copies_input(self):
        data = {"a": 1}
        node = ConfigNode(data)
        node.node("a").set_value(2)
        assert data == {"a": 1}


class TestWriting:
    def test_creates_parents(self):
        node = ConfigNode()
        node.node("a", "b", "c").set_value(True)
        assert node.raw() == {"a": {"b": {"c": True}}}

    def test_replaces_scalar_parent(self):
        node = ConfigNode({"a": 1})
        node.node("a", "b").set_value(2)
        assert node.raw() == {"a": {"b": 2}}

    def test_handles_share_document(self):
        root = ConfigNode()
        handle = root.node("x")
        handle.set_value("v")
        assert root.node("x").get_string() == "v"

    def test_set_none_removes(self):
        node = ConfigNode({"a": 1, "b": 2})
        node.node("a").set_value(None)
        assert node.raw() == {"b": 2}

    def test_remove(self):
        node = ConfigNode({"a": 1})
        assert node.node("a").remove() is True
        assert node.node("a").remove() is False
        assert node.node("a").is_virtual()

    def test_set_root(self):
        node = ConfigNode({"a": 1})
        node.set_value("plain")
        assert node.raw() == "plain"


class TestTypedValues:
    def test_unregistered_type(self):
        from textconf import SerializerNotFoundError

        with pytest.raises(SerializerNotFoundError):
            ConfigNode({"x": 1}).node("x").get_value(complex)

    def test_set_value_as_none_removes(self):
        from textconf import Text

        node = ConfigNode({"t": {"text": "a"}})
        node.node("t").set_value_as(Text, None)
        assert node.node("t").is_virtual()


class TestJsonLoader:
    def test_loads(self):
        assert loads_json('{"a": {"b": true}}').node("a", "b").get_bool() is True

    def test_loads_invalid(self):
        with pytest.raises(MappingError):
            loads_json("{not json")

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "doc.json"
        node = ConfigNode({"greeting": "héllo"})
        save_json(node, path, indent=4)

        assert path.read_text(encoding="utf-8").startswith("{\n    ")
        assert load_json(path).raw() == {"greeting": "héllo"}

    def test_load_missing_file(self, tmp_path):
        assert load_json(tmp_path / "absent.json").is_virtual()

    def test_load_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1,", encoding="utf-8")
        with pytest.raises(MappingError, match="bad.json"):
            load_json(path)

    def test_dumps_uses_configured_indent(self, monkeypatch):
        from textconf.settings import Settings

        monkeypatch.setattr("textconf.settings.get_settings", lambda: Settings(json_indent=3))
        assert dumps_json(ConfigNode({"a": 1})) == '{\n   "a": 1\n}'

    def test_dumps_explicit_indent(self):
        assert dumps_json(ConfigNode({"a": [1, 2]}), indent=0) == '{\n"a": [\n1,\n2\n]\n}'
