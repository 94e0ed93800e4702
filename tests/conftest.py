"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from dotpath.graph import DirectedGraph
from dotpath.parser import parse_string

TRIANGLE_DOT = """\
digraph G {
    A;
    B;
    C;
    A -> B;
    B -> C;
    C -> A;
}
"""

TWO_ROUTES_DOT = """\
digraph G {
    A -> B;
    B -> C;
    C -> D;
    A -> E;
    E -> F;
    F -> D;
    Z;
}
"""


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def triangle_text() -> str:
    """DOT text for the A -> B -> C -> A cycle."""
    return TRIANGLE_DOT


@pytest.fixture
def triangle_file(tmp_path: Path) -> Path:
    """The triangle graph written to a temporary file."""
    path = tmp_path / "triangle.dot"
    path.write_text(TRIANGLE_DOT, encoding="utf-8")
    return path


@pytest.fixture
def triangle() -> DirectedGraph:
    """Parsed A -> B -> C -> A cycle."""
    return parse_string(TRIANGLE_DOT)


@pytest.fixture
def two_routes() -> DirectedGraph:
    """A reaches D by A-B-C-D and A-E-F-D (3 edges each); Z is isolated."""
    return parse_string(TWO_ROUTES_DOT)


@pytest.fixture
def branching() -> DirectedGraph:
    """Tree-like graph used by the random walk demo."""
    graph = DirectedGraph()
    graph.add_nodes(["a", "b", "c", "d", "e", "f", "g", "h"])
    for source, target in [
        ("a", "b"),
        ("b", "c"),
        ("a", "e"),
        ("e", "f"),
        ("e", "g"),
        ("g", "h"),
    ]:
        graph.add_edge(source, target)
    return graph

