"""
BlockInstance - A concrete unit of content of a registered kind.

A block carries an identity token, the name of its kind and an attributes
mapping. Blocks are created through BlockFactory so that kind defaults are
filled in; constructing one directly is fine for blocks that already exist
(e.g. loaded by a host application).

Usage:
    block = BlockInstance(id=1, name="core/text-block", attributes={"value": "ribs"})
"""

from __future__ import annotations
from typing import Any, Mapping

from pydantic import BaseModel, Field


def _generate_id() -> str:
    """Generate a unique ID."""
    from uuid import uuid4
    return uuid4().hex


class BlockInstance(BaseModel):
    """
    A block of content.

    Attributes:
        id: Identity token, stable across in-place edits, replaced on creation
        name: Name of the block kind
        attributes: Attribute values keyed by attribute name
    """

    id: Any = Field(default_factory=_generate_id)
    name: str
    attributes: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def is_block_like(cls, value: Any) -> bool:
        """True if value is a block or a mapping shaped like one."""
        if isinstance(value, BlockInstance):
            return True
        if isinstance(value, Mapping):
            name = value.get("name")
            attributes = value.get("attributes", {})
            return isinstance(name, str) and bool(name) and isinstance(attributes, Mapping)
        return False

    @classmethod
    def from_block_like(cls, value: BlockInstance | Mapping[str, Any]) -> BlockInstance:
        if isinstance(value, BlockInstance):
            return value
        return cls.model_validate(dict(value))

    def __repr__(self) -> str:
        return f"BlockInstance(id={self.id!r}, name={self.name!r}, attributes={self.attributes!r})"
