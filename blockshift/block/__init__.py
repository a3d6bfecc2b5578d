"""
Block transformation engine.

This module provides:
- BlockInstance: A block of content of a registered kind
- BlockKind: Definition of a kind (defaults, transforms, callbacks)
- TransformRule: Directional conversion between kinds
- BlockKindRegistry: Owner of the registered kinds
- BlockFactory: Creates blocks and switches them between kinds
- render_block: Produce a block's output through its kind
"""

from .block import BlockInstance
from .kind import BlockKind, BlockTransforms, TransformRule
from .registry import BlockKindRegistry, BlockKindError, BlockKindNotFound
from .output import Single, Sequence, Invalid, inspect_output
from .factory import BlockFactory
from .render import render_block

__all__ = [
    "BlockInstance",
    "BlockKind",
    "BlockTransforms",
    "TransformRule",
    "BlockKindRegistry",
    "BlockKindError",
    "BlockKindNotFound",
    "Single",
    "Sequence",
    "Invalid",
    "inspect_output",
    "BlockFactory",
    "render_block",
]
