from __future__ import annotations
from typing import Any

from .block import BlockInstance
from .registry import BlockKindError, BlockKindRegistry


def render_block(registry: BlockKindRegistry, block: BlockInstance) -> Any:
    """
    Produce the output of a block through its kind's callbacks.

    The server-side render callback wins over save when the kind has both.
    """
    kind = registry.get(block.name)
    callback = kind.render or kind.save
    if callback is None:
        raise BlockKindError(f"Block '{kind.name}' has neither a render nor a save callback")
    return callback(block.attributes)
