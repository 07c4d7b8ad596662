"""Value tree for binary VDF documents.

A decoded document is a mapping of keys to one of three node types. Each node
is a frozen Pydantic model so that trees are validated on construction and
cannot be reassigned once built.

Example:
    >>> tree = {
    ...     "name": StringNode(value="game"),
    ...     "appid": NumberNode(value=440),
    ...     "config": MapNode(entries={"launch": StringNode(value="-novid")}),
    ... }
"""

from __future__ import annotations

from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field

U32_MAX = 0xFFFFFFFF


class _Node(BaseModel):
    """Common configuration for all value nodes."""

    model_config = ConfigDict(
        # Nodes are immutable once built
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        strict=True,
    )


class StringNode(_Node):
    """A string value. Must not contain NUL (checked when encoding)."""

    value: str

    def __init__(self, value: str | None = None, **data: object) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)


class NumberNode(_Node):
    """An unsigned 32-bit integer value, little-endian on the wire."""

    value: int = Field(ge=0, le=U32_MAX)

    def __init__(self, value: int | None = None, **data: object) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)


class MapNode(_Node):
    """A nested map of keys to values.

    Insertion order of ``entries`` is preserved and used when encoding, but two
    maps compare equal regardless of key order.
    """

    entries: Dict[str, "Value"] = Field(default_factory=dict)

    def __init__(self, entries: Dict[str, "Value"] | None = None, **data: object) -> None:
        if entries is not None:
            data["entries"] = entries
        super().__init__(**data)

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries


Value = Union[MapNode, StringNode, NumberNode]
Entries = Dict[str, Value]

MapNode.model_rebuild()
