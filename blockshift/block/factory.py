"""
BlockFactory - Creates blocks and switches them between kinds.

create_block() instantiates a registered kind, filling in its default
attributes. switch_to_block_type() converts a block into one or more blocks
of another kind through a transform rule declared on either side of the
conversion.

Usage:
    registry = BlockKindRegistry()
    factory = BlockFactory(registry)
    block = factory.create_block("core/text-block", {"value": "ribs"})
    switched = factory.switch_to_block_type(block, "core/heading-block")
"""

from __future__ import annotations
import copy
import logging
from typing import Any, Mapping

from ..config import get_settings
from .block import BlockInstance, _generate_id
from .kind import BlockKind, TransformRule
from .output import Invalid, inspect_output
from .registry import BlockKindRegistry


logger = logging.getLogger(__name__)


class BlockFactory:
    """
    Block creation and transformation over a BlockKindRegistry.

    Attributes:
        registry: The registry kinds are looked up in
        suppress_transform_errors: When True, an exception raised by a transform
            function is logged and the switch returns None. When False the
            exception propagates to the caller.
    """

    def __init__(self, registry: BlockKindRegistry, suppress_transform_errors: bool | None = None):
        if suppress_transform_errors is None:
            suppress_transform_errors = get_settings().suppress_transform_errors
        self.registry = registry
        self.suppress_transform_errors = suppress_transform_errors

    # =========================================================================
    # Creation
    # =========================================================================

    def create_block(self, name: str, attributes: Mapping[str, Any] | None = None) -> BlockInstance:
        """
        Create a new block of a registered kind.

        Args:
            name: The kind name
            attributes: Attribute values, overriding the kind defaults

        Returns:
            A new block with a fresh id

        Raises:
            BlockKindNotFound: if the kind is not registered
        """
        kind = self.registry.get(name)
        merged = {key: copy.deepcopy(value) for key, value in kind.default_attributes.items()}
        if attributes:
            merged.update(attributes)
        return BlockInstance(id=_generate_id(), name=kind.name, attributes=merged)

    def clone_block(self, block: BlockInstance, attributes: Mapping[str, Any] | None = None) -> BlockInstance:
        """Copy a block under a new id, optionally overriding some attributes."""
        merged = copy.deepcopy(block.attributes)
        if attributes:
            merged.update(attributes)
        return BlockInstance(id=_generate_id(), name=block.name, attributes=merged)

    # =========================================================================
    # Transformation
    # =========================================================================

    def find_transforms(self, source: str, destination: str) -> list[TransformRule]:
        """
        Rules able to convert source kind blocks into destination kind blocks.

        The source kind's "to" rules come first, then the destination kind's
        "from" rules, each in declaration order.
        """
        candidates: list[TransformRule] = []
        if source_kind := self.registry.find(source):
            candidates.extend(source_kind.transforms.matching("to", destination))
        if destination_kind := self.registry.find(destination):
            candidates.extend(destination_kind.transforms.matching("from", source))
        return candidates

    def switch_to_block_type(self, block: BlockInstance, name: str) -> list[BlockInstance] | None:
        """
        Convert a block into blocks of another kind.

        Only the first matching rule is applied. Its output must be one or more
        blocks of registered kinds that the rule declared (or the source and
        destination kinds themselves), with at least one block of the
        destination kind. That block takes over the source block's id.

        Args:
            block: The block to convert
            name: The destination kind name

        Returns:
            The converted blocks, or None when the block cannot be converted
        """
        rules = self.find_transforms(block.name, name)
        if not rules:
            logger.debug("no transform from %s to %s", block.name, name)
            return None

        rule = rules[0]
        try:
            raw = rule.transform(block)
        except Exception:
            if not self.suppress_transform_errors:
                raise
            logger.warning("transform from %s to %s failed", block.name, name, exc_info=True)
            return None

        output = inspect_output(raw)
        if isinstance(output, Invalid):
            logger.debug("rejected transform from %s to %s: %s", block.name, name, output.reason)
            return None

        allowed = set(rule.blocks) | {block.name, name}
        for result in output.blocks:
            if result.name not in allowed or result.name not in self.registry:
                logger.debug(
                    "rejected transform from %s to %s: unexpected block kind %s",
                    block.name, name, result.name,
                )
                return None

        results = list(output.blocks)
        for index, result in enumerate(results):
            if result.name == name:
                results[index] = result.model_copy(update={"id": block.id}, deep=True)
                break
        else:
            logger.debug("rejected transform from %s to %s: no %s block in output", block.name, name, name)
            return None

        return results

    def get_possible_transformations(self, block: BlockInstance) -> list[BlockKind]:
        """Registered kinds the block has a transform rule towards."""
        names: list[str] = []
        if source_kind := self.registry.find(block.name):
            for rule in source_kind.transforms.to:
                names.extend(rule.blocks)
        for kind in self.registry.list_kinds():
            if any(rule.matches(block.name) for rule in kind.transforms.from_):
                names.append(kind.name)

        kinds: list[BlockKind] = []
        seen: set[str] = {block.name}
        for kind_name in names:
            if kind_name in seen:
                continue
            seen.add(kind_name)
            if kind := self.registry.find(kind_name):
                kinds.append(kind)
        return kinds
