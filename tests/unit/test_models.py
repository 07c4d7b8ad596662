"""Unit tests for the value tree and conversions."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from vdfbin import (
    CodecConfig,
    DepthExceededError,
    EncodeError,
    MapNode,
    NumberNode,
    StringNode,
    from_python,
    to_python,
)
from vdfbin.models import Entries


class TestNodes:
    """Test node construction and validation."""

    def test_positional_and_keyword(self) -> None:
        """Test both construction styles are equivalent."""
        assert StringNode("x") == StringNode(value="x")
        assert NumberNode(5) == NumberNode(value=5)
        assert MapNode({"a": NumberNode(1)}) == MapNode(entries={"a": NumberNode(1)})

    def test_empty_map_default(self) -> None:
        """Test MapNode defaults to no entries."""
        assert MapNode().entries == {}

    @pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
    def test_number_out_of_range(self, value: int) -> None:
        """Test numbers must fit in an unsigned 32-bit integer."""
        with pytest.raises(ValidationError):
            NumberNode(value)

    def test_number_bounds(self) -> None:
        """Test the extremes of the range."""
        assert NumberNode(0).value == 0
        assert NumberNode(0xFFFFFFFF).value == 0xFFFFFFFF

    def test_strict_types(self) -> None:
        """Test no coercion between wire types."""
        with pytest.raises(ValidationError):
            NumberNode(True)
        with pytest.raises(ValidationError):
            NumberNode("3")  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            StringNode(b"bytes")  # type: ignore[arg-type]

    def test_map_rejects_plain_values(self) -> None:
        """Test map entries must be nodes."""
        with pytest.raises(ValidationError):
            MapNode({"a": "plain"})  # type: ignore[dict-item]

    def test_frozen(self) -> None:
        """Test nodes cannot be reassigned."""
        node = StringNode("x")
        with pytest.raises(ValidationError):
            node.value = "y"  # type: ignore[misc]

    def test_map_equality_ignores_order(self) -> None:
        """Test maps are sets of key-value pairs."""
        a = MapNode({"x": NumberNode(1), "y": StringNode("2")})
        b = MapNode({"y": StringNode("2"), "x": NumberNode(1)})
        assert a == b

    def test_map_access(self) -> None:
        """Test item access helpers."""
        node = MapNode({"x": NumberNode(1)})
        assert node["x"] == NumberNode(1)
        assert "x" in node
        assert "y" not in node


class TestConversion:
    """Test conversion to and from plain Python objects."""

    def test_to_python(self, nested_tree: Entries) -> None:
        """Test nodes become str, int and dict."""
        assert to_python(nested_tree) == {
            "key1": "value1",
            "key2": 3,
            "key3": {"key4": "value2", "key5": "value3"},
        }

    def test_to_python_is_json_serializable(self, nested_tree: Entries) -> None:
        """Test output survives json.dumps."""
        assert json.loads(json.dumps(to_python(MapNode(nested_tree)))) == to_python(nested_tree)

    def test_from_python(self, nested_tree: Entries) -> None:
        """Test plain values become nodes."""
        obj = {"key1": "value1", "key2": 3, "key3": {"key4": "value2", "key5": "value3"}}
        assert from_python(obj) == nested_tree

    def test_inverse(self, nested_tree: Entries) -> None:
        """Test from_python(to_python(tree)) is the identity."""
        assert from_python(to_python(nested_tree)) == nested_tree

    def test_nodes_pass_through(self) -> None:
        """Test existing nodes are kept."""
        node = NumberNode(9)
        assert from_python({"n": node})["n"] is node

    @pytest.mark.parametrize(
        ("obj", "message"),
        [
            ({"b": True}, "unsupported type bool"),
            ({"f": 1.5}, "unsupported type float"),
            ({"l": [1, 2]}, "unsupported type list"),
            ({"n": None}, "unsupported type NoneType"),
            ({"neg": -1}, "out of bounds"),
            ({"big": 2**32}, "out of bounds"),
            ({1: "x"}, "keys must be str"),
            ({"outer": {"inner": 2.0}}, "unsupported type float"),
        ],
    )
    def test_from_python_errors(self, obj: dict, message: str) -> None:
        """Test values with no wire representation."""
        with pytest.raises(EncodeError, match=message):
            from_python(obj)

    def test_from_python_requires_mapping(self) -> None:
        """Test top level must be a mapping."""
        with pytest.raises(EncodeError, match="Expected a mapping"):
            from_python(["not", "a", "map"])  # type: ignore[arg-type]

    def test_depth_limit(self) -> None:
        """Test conversion applies the configured nesting limit."""
        config = CodecConfig(max_depth=2)
        nested = {"a": {"b": {"c": {}}}}

        with pytest.raises(DepthExceededError, match="max_depth=2"):
            from_python(nested, config=config)
        with pytest.raises(DepthExceededError, match="max_depth=2"):
            to_python(from_python(nested), config=config)

        assert to_python(from_python(nested, config=CodecConfig(max_depth=3))) == nested

    def test_hostile_nesting(self) -> None:
        """Test deeply nested input fails with a depth error, not a recursion error."""
        obj: dict = {}
        for _ in range(5000):
            obj = {"a": obj}

        with pytest.raises(DepthExceededError):
            from_python(obj)
