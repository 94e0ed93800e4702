"""
Path value returned by graph searches, plus display helpers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dotpath.errors import EmptyPathError


class Path:
    """
    Ordered sequence of node labels describing a walk through a graph.

    Strategies build a path with append()/pop() and hand it to the caller,
    who owns it from then on. copy() gives an independent path that can be
    extended without touching the original.
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[str] = ()) -> None:
        self._nodes: list[str] = list(nodes)

    def append(self, label: str) -> None:
        """Add a node to the end of the path."""
        self._nodes.append(label)

    def pop(self) -> str:
        """
        Remove and return the last node.

        Raises:
            EmptyPathError: If the path has no nodes
        """
        if not self._nodes:
            raise EmptyPathError("Cannot pop from an empty path")
        return self._nodes.pop()

    def copy(self) -> Path:
        """Independent copy with the same node sequence."""
        return Path(self._nodes)

    @property
    def nodes(self) -> tuple[str, ...]:
        """Node labels from first to last."""
        return tuple(self._nodes)

    @property
    def start(self) -> str:
        """First node. Raises EmptyPathError on an empty path."""
        if not self._nodes:
            raise EmptyPathError()
        return self._nodes[0]

    @property
    def end(self) -> str:
        """Last node. Raises EmptyPathError on an empty path."""
        if not self._nodes:
            raise EmptyPathError()
        return self._nodes[-1]

    @property
    def length(self) -> int:
        """Number of edges (nodes - 1, never negative)."""
        return max(0, len(self._nodes) - 1)

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._nodes))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._nodes == other._nodes

    def __hash__(self) -> int:
        return hash(tuple(self._nodes))

    def __str__(self) -> str:
        if not self._nodes:
            return "Empty path"
        return " -> ".join(self._nodes)

    def __repr__(self) -> str:
        return f"Path({self._nodes!r})"


def format_simple(path: Path | None) -> str:
    """Compact arrow form, e.g. 'A->B->C'."""
    if path is None or path.is_empty():
        return "Empty path"
    return "->".join(path.nodes)


def format_nodes(path: Path | None) -> str:
    """Verbose form, e.g. 'Path{nodes=[Node{A}, Node{B}]}'."""
    if path is None or path.is_empty():
        return "Path{nodes=[]}"
    inner = ", ".join(f"Node{{{label}}}" for label in path.nodes)
    return f"Path{{nodes=[{inner}]}}"


def paths_equal(first: Path | None, second: Path | None) -> bool:
    """Compare two paths by node sequence; two Nones are equal."""
    if first is None or second is None:
        return first is second
    return first.nodes == second.nodes
