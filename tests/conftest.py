from pathlib import Path

import pytest

from wordchain.chain import ChainBuilder, NaiveChainBuilder
from wordchain.utils import ChainSolver


@pytest.fixture
def builder() -> ChainBuilder:
    return ChainBuilder()


@pytest.fixture
def naive() -> NaiveChainBuilder:
    return NaiveChainBuilder()


@pytest.fixture
def sample_text() -> str:
    return "Apple egg Giraffe 42 elephant tiger rabbit tomato otter"


@pytest.fixture
def sample_path() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "text3.in"


def assert_forest_consistent(builder: ChainBuilder) -> None:
    """Exhaustive scan of the forest and registry invariants."""
    for index, node in builder.forest.items():
        seen = set()
        for key, child_index in node.children.items():
            child = builder.forest[child_index]
            assert child.parent == index
            assert ChainSolver.boundary(child.token)[1] == key
            assert key not in seen
            seen.add(key)
        if node.parent is None:
            assert node.depth == 1
        else:
            assert node.depth == builder.forest[node.parent].depth + 1

    for key, index in builder.registry.items():
        registered = builder.forest[index]
        assert ChainSolver.boundary(registered.token)[1] == key
        for _, node in builder.forest.items():
            if ChainSolver.boundary(node.token)[1] == key:
                assert node.depth <= registered.depth


def assert_is_chain(chain) -> None:
    for previous, current in zip(chain, chain[1:]):
        assert ChainSolver.boundary(previous)[1] == ChainSolver.boundary(current)[0]
