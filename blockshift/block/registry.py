"""
BlockKindRegistry - Owns the registered block kinds.

The registry maps kind names to BlockKind definitions. It is an explicit
object: create one per process (or per test) and hand it to the BlockFactory.
"""

from __future__ import annotations
import logging
import re
from typing import Any, Iterator

from .kind import BlockKind


logger = logging.getLogger(__name__)


_NAME_PATTERN = re.compile(r"^[a-z0-9-]+(/[a-z0-9-]+)?$")


class BlockKindError(Exception):
    """Raised when a block kind cannot be registered or used."""
    pass


class BlockKindNotFound(KeyError):
    """Raised when looking up a kind that was never registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Block kind '{self.name}' is not registered"


class BlockKindRegistry:
    """
    Mapping of kind name -> BlockKind.

    Usage:
        registry = BlockKindRegistry()
        registry.register("core/text-block", default_attributes={"value": ""}, save=render_text)
        kind = registry.get("core/text-block")
    """

    def __init__(self):
        self._kinds: dict[str, BlockKind] = {}

    def register(self, name: str | BlockKind, **settings: Any) -> BlockKind:
        """
        Register a block kind.

        Args:
            name: The kind name, or a ready BlockKind
            **settings: BlockKind fields (default_attributes, transforms, save, render, title)

        Returns:
            The registered BlockKind

        Raises:
            BlockKindError: invalid name, duplicate name or non callable callbacks
        """
        if isinstance(name, BlockKind):
            if settings:
                raise BlockKindError("Cannot pass settings together with a BlockKind")
            kind = name
        else:
            if not isinstance(name, str):
                raise BlockKindError(f"Block names must be strings, got {type(name).__name__}")
            for callback in ("save", "render"):
                if settings.get(callback) is not None and not callable(settings[callback]):
                    raise BlockKindError(f"The '{callback}' property of '{name}' must be callable")
            kind = BlockKind(name=name, **settings)

        if not _NAME_PATTERN.match(kind.name):
            raise BlockKindError(
                f"Block names must contain lowercase alphanumeric characters or dashes, "
                f"optionally prefixed by a namespace, e.g. my-plugin/my-block. Got '{kind.name}'"
            )
        if kind.name in self._kinds:
            raise BlockKindError(f"Block '{kind.name}' is already registered")

        self._kinds[kind.name] = kind
        logger.debug("registered block kind %s", kind.name)
        return kind

    def unregister(self, name: str) -> BlockKind:
        kind = self._kinds.pop(name, None)
        if kind is None:
            raise BlockKindNotFound(name)
        logger.debug("unregistered block kind %s", name)
        return kind

    def get(self, name: str) -> BlockKind:
        """Get a kind by name. Raises BlockKindNotFound if it is not registered."""
        kind = self._kinds.get(name)
        if kind is None:
            raise BlockKindNotFound(name)
        return kind

    def find(self, name: str) -> BlockKind | None:
        return self._kinds.get(name)

    def list_kinds(self) -> list[BlockKind]:
        """All registered kinds, in registration order."""
        return list(self._kinds.values())

    def clear(self) -> None:
        self._kinds.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def __iter__(self) -> Iterator[BlockKind]:
        return iter(self.list_kinds())
