"""
Simple directed graph keyed by string labels.

Adjacency is kept in both directions so degree checks and edge removal
stay O(1). Dicts (not sets) hold the neighbours so that iteration order
follows insertion order, which keeps searches reproducible for a given
input file.
"""

from __future__ import annotations

from collections.abc import Iterable

from dotpath.errors import EdgeNotFoundError, NodeHasEdgesError, NodeNotFoundError


class DirectedGraph:
    """
    Directed graph with unique node labels and no parallel edges.

    Invariants:
        - Every edge endpoint is a node (add_edge creates missing endpoints).
        - Adding an existing node or edge is a no-op that returns False.
        - A node can only be removed once it has no incident edges.
    """

    def __init__(self) -> None:
        self._successors: dict[str, dict[str, None]] = {}
        self._predecessors: dict[str, dict[str, None]] = {}
        self._edge_count = 0

    # =========================================================================
    # Nodes
    # =========================================================================

    def add_node(self, label: str) -> bool:
        """Add a node. Returns False if it already existed."""
        if label in self._successors:
            return False
        self._successors[label] = {}
        self._predecessors[label] = {}
        return True

    def add_nodes(self, labels: Iterable[str]) -> None:
        """Add several nodes in order; existing ones are skipped."""
        for label in labels:
            self.add_node(label)

    def remove_node(self, label: str) -> bool:
        """
        Remove a node that has no incident edges.

        Raises:
            NodeNotFoundError: If the node does not exist
            NodeHasEdgesError: If the node still has incoming or outgoing edges
        """
        self._require_node(label)
        in_degree = len(self._predecessors[label])
        out_degree = len(self._successors[label])
        if in_degree or out_degree:
            raise NodeHasEdgesError(label, in_degree, out_degree)

        del self._successors[label]
        del self._predecessors[label]
        return True

    def remove_nodes(self, labels: Iterable[str]) -> None:
        """
        Remove several nodes in order.

        Stops at the first failure; nodes removed before it stay removed.
        """
        for label in labels:
            self.remove_node(label)

    def contains_node(self, label: str) -> bool:
        """Check if a node exists."""
        return label in self._successors

    def node_count(self) -> int:
        """Number of nodes."""
        return len(self._successors)

    def nodes(self) -> set[str]:
        """All node labels."""
        return set(self._successors)

    # =========================================================================
    # Edges
    # =========================================================================

    def add_edge(self, source: str, target: str) -> bool:
        """
        Add a directed edge, creating either endpoint if missing.

        Returns:
            True if the edge is new, False if it already existed
        """
        self.add_node(source)
        self.add_node(target)

        if target in self._successors[source]:
            return False

        self._successors[source][target] = None
        self._predecessors[target][source] = None
        self._edge_count += 1
        return True

    def remove_edge(self, source: str, target: str) -> bool:
        """
        Remove a directed edge.

        Raises:
            NodeNotFoundError: If either endpoint does not exist
            EdgeNotFoundError: If both nodes exist but are not connected
        """
        self._require_node(source, role="Source node")
        self._require_node(target, role="Destination node")
        if target not in self._successors[source]:
            raise EdgeNotFoundError(source, target)

        del self._successors[source][target]
        del self._predecessors[target][source]
        self._edge_count -= 1
        return True

    def contains_edge(self, source: str, target: str) -> bool:
        """Check if the ordered pair (source, target) is an edge."""
        return target in self._successors.get(source, {})

    def edge_count(self) -> int:
        """Number of edges."""
        return self._edge_count

    def edge_pairs(self) -> list[tuple[str, str]]:
        """All edges as (source, target) tuples."""
        return [
            (source, target)
            for source, targets in self._successors.items()
            for target in targets
        ]

    def edges(self) -> list[str]:
        """All edges formatted as 'source -> target'."""
        return [f"{source} -> {target}" for source, target in self.edge_pairs()]

    # =========================================================================
    # Adjacency
    # =========================================================================

    def outgoing_neighbors(self, label: str) -> list[str]:
        """
        Targets of the node's outgoing edges.

        Raises:
            NodeNotFoundError: If the node does not exist
        """
        self._require_node(label)
        return list(self._successors[label])

    def incoming_neighbors(self, label: str) -> list[str]:
        """Sources of the node's incoming edges."""
        self._require_node(label)
        return list(self._predecessors[label])

    def in_degree(self, label: str) -> int:
        """Number of edges ending at the node."""
        self._require_node(label)
        return len(self._predecessors[label])

    def out_degree(self, label: str) -> int:
        """Number of edges starting at the node."""
        self._require_node(label)
        return len(self._successors[label])

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_node(self, label: str, role: str = "Node") -> None:
        if label not in self._successors:
            raise NodeNotFoundError(label, role=role)

    def __contains__(self, label: object) -> bool:
        return label in self._successors

    def __len__(self) -> int:
        return len(self._successors)

    def __str__(self) -> str:
        lines = [
            "Graph:",
            f"Number of nodes: {self.node_count()}",
            f"Nodes: [{', '.join(self._successors)}]",
            f"Number of edges: {self.edge_count()}",
            "Edges:",
        ]
        lines.extend(f"  {edge}" for edge in self.edges())
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.node_count()}, edges={self.edge_count()})"
