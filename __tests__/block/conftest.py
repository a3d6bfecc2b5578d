import pytest
from blockshift.block import BlockFactory, BlockKindRegistry


@pytest.fixture()
def registry():
    registry = BlockKindRegistry()
    yield registry
    registry.clear()


@pytest.fixture()
def factory(registry):
    return BlockFactory(registry, suppress_transform_errors=False)
