"""
Tagged views of what a transform function returned.

Transform functions may return a single block, a list of blocks, or
something that is not a block at all. inspect_output() turns the raw value
into one of:

- Single: exactly one block
- Sequence: an ordered, non empty list of blocks
- Invalid: anything else, with the reason it was rejected
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Union

from pydantic import ValidationError

from .block import BlockInstance


@dataclass
class Single:
    block: BlockInstance

    @property
    def blocks(self) -> list[BlockInstance]:
        return [self.block]


@dataclass
class Sequence:
    blocks: list[BlockInstance]


@dataclass
class Invalid:
    reason: str

    @property
    def blocks(self) -> list[BlockInstance]:
        return []


TransformOutput = Union[Single, Sequence, Invalid]


def inspect_output(value: Any) -> TransformOutput:
    if value is None:
        return Invalid("transform returned nothing")

    if isinstance(value, (BlockInstance, Mapping)):
        if not BlockInstance.is_block_like(value):
            return Invalid(f"transform returned a value that is not a block: {value!r}")
        try:
            return Single(BlockInstance.from_block_like(value))
        except ValidationError as e:
            return Invalid(f"transform returned a malformed block: {e}")

    if isinstance(value, (list, tuple)):
        if not value:
            return Invalid("transform returned an empty list")
        blocks: list[BlockInstance] = []
        for index, item in enumerate(value):
            if not BlockInstance.is_block_like(item):
                return Invalid(f"item {index} returned by transform is not a block: {item!r}")
            try:
                blocks.append(BlockInstance.from_block_like(item))
            except ValidationError as e:
                return Invalid(f"item {index} returned by transform is a malformed block: {e}")
        return Sequence(blocks)

    return Invalid(f"transform returned an unsupported value: {type(value).__name__}")
