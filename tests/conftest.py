"""Shared fixtures and helpers for ugraphkit tests."""

from pathlib import Path

import pytest

import ugraphkit

DATA_DIR = Path(__file__).parent.parent / "data"


# --- Session-scoped fixtures ---


@pytest.fixture(scope="session")
def data_dir() -> Path:
    """Directory with the sample graph documents."""
    return DATA_DIR


@pytest.fixture(scope="session")
def sample_graphs() -> list[ugraphkit.Graph]:
    """The three graphs of the multi graph sample document."""
    return ugraphkit.loaders.file(DATA_DIR / "graphs.json")


# --- Function-scoped fixtures ---


@pytest.fixture
def labeled_graph() -> ugraphkit.Graph:
    """Graph over A, B, C with no edges yet."""
    return ugraphkit.Graph.from_labels(
        ["A", "B", "C"], name="labeled", description="three labels", graph_id=1
    )


@pytest.fixture
def path_graph() -> ugraphkit.Graph:
    """Index based graph 0 - 1 - 2."""
    graph = ugraphkit.Graph(3)
    graph.add_edge(0, 1, 5)
    graph.add_edge(1, 2, 3)
    return graph
