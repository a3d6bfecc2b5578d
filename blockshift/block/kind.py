"""
BlockKind - Definition of a block kind.

A kind declares the default attributes of its blocks, the transforms it
takes part in and the callbacks that produce its output.

TransformRule - A directional conversion capability.
    "from" rules sit on the destination kind and list eligible source kinds.
    "to" rules sit on the source kind and list eligible destination kinds.
"""

from __future__ import annotations
from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .block import BlockInstance


TransformDirection = Literal["from", "to"]


class TransformRule(BaseModel):
    """
    Converts a block of one kind into blocks of another.

    Attributes:
        direction: Which side of the conversion owns the rule
        blocks: Kind names on the other side of the conversion
        transform: Called with the source block, returns a block, a list of
            blocks or None
    """

    direction: TransformDirection = "from"
    blocks: list[str] = Field(default_factory=list)
    transform: Callable[[BlockInstance], Any]

    def matches(self, name: str) -> bool:
        return name in self.blocks


class BlockTransforms(BaseModel):
    """Ordered transform rules of a kind, split by direction."""

    model_config = ConfigDict(populate_by_name=True)

    from_: list[TransformRule] = Field(default_factory=list, alias="from")
    to: list[TransformRule] = Field(default_factory=list)

    @model_validator(mode="after")
    def _stamp_direction(self) -> "BlockTransforms":
        # rules may be shared between kinds, each kind keeps its own copy
        self.from_ = [rule.model_copy(update={"direction": "from"}) for rule in self.from_]
        self.to = [rule.model_copy(update={"direction": "to"}) for rule in self.to]
        return self

    def rules(self, direction: TransformDirection) -> list[TransformRule]:
        return self.from_ if direction == "from" else self.to

    def matching(self, direction: TransformDirection, name: str) -> list[TransformRule]:
        return [rule for rule in self.rules(direction) if rule.matches(name)]


class BlockKind(BaseModel):
    """
    A registered block kind.

    Attributes:
        name: Unique kind name, e.g. "core/text-block"
        default_attributes: Default value per attribute, copied into each new block
        transforms: Transform rules declared by this kind
        save: Produces the saved output of a block from its attributes
        render: Optional server-side render callback
        title: Display title
    """

    model_config = ConfigDict(frozen=True)

    name: str
    default_attributes: dict[str, Any] = Field(default_factory=dict)
    transforms: BlockTransforms = Field(default_factory=BlockTransforms)
    save: Callable[[dict[str, Any]], Any] | None = None
    render: Callable[[dict[str, Any]], str] | None = None
    title: str | None = None

    def __repr__(self) -> str:
        return f"BlockKind(name={self.name!r})"

