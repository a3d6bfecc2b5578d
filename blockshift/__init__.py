from .block import (
    BlockInstance,
    BlockKind,
    BlockTransforms,
    TransformRule,
    BlockKindRegistry,
    BlockKindError,
    BlockKindNotFound,
    BlockFactory,
    render_block,
)
from .config import Settings, get_settings, configure_logging

__all__ = [
    "BlockInstance",
    "BlockKind",
    "BlockTransforms",
    "TransformRule",
    "BlockKindRegistry",
    "BlockKindError",
    "BlockKindNotFound",
    "BlockFactory",
    "render_block",
    "Settings",
    "get_settings",
    "configure_logging",
]
