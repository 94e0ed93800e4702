"""
Graph snapshots in msgpack format.

A snapshot is a map with two keys:

    {"nodes": ["A", "B", "C"], "edges": [["A", "B"], ["B", "C"]]}

Nodes are listed so isolated nodes survive the round trip.
"""

from __future__ import annotations

import logging
from os import PathLike

import msgpack

from dotpath.errors import GraphFormatError
from dotpath.graph.model import DirectedGraph

logger = logging.getLogger(__name__)


def graph_to_dict(graph: DirectedGraph) -> dict:
    """Plain-data form of a graph."""
    return {
        "nodes": sorted(graph.nodes()),
        "edges": [[source, target] for source, target in graph.edge_pairs()],
    }


def graph_from_dict(data: object) -> DirectedGraph:
    """
    Rebuild a graph from its plain-data form.

    Raises:
        GraphFormatError: If the data is not a valid snapshot
    """
    if not isinstance(data, dict) or "nodes" not in data or "edges" not in data:
        raise GraphFormatError("Snapshot must be a map with 'nodes' and 'edges'")
    if not isinstance(data["nodes"], list) or not isinstance(data["edges"], list):
        raise GraphFormatError("Snapshot 'nodes' and 'edges' must be lists")

    graph = DirectedGraph()
    for node in data["nodes"]:
        if not isinstance(node, str):
            raise GraphFormatError(f"Node label must be a string, got {node!r}")
        graph.add_node(node)

    for edge in data["edges"]:
        if (
            not isinstance(edge, (list, tuple))
            or len(edge) != 2
            or not all(isinstance(label, str) for label in edge)
        ):
            raise GraphFormatError(f"Edge must be a [source, target] pair, got {edge!r}")
        graph.add_edge(edge[0], edge[1])

    return graph


def save_graph(graph: DirectedGraph, filepath: str | PathLike[str]) -> None:
    """Write a graph snapshot."""
    with open(filepath, "wb") as f:
        msgpack.pack(graph_to_dict(graph), f)
    logger.info(f"Saved graph snapshot to {filepath}")


def load_graph(filepath: str | PathLike[str]) -> DirectedGraph:
    """
    Read a graph snapshot.

    Raises:
        OSError: If the file cannot be read
        GraphFormatError: If the file is not a valid snapshot
    """
    logger.info(f"Loading graph snapshot from {filepath}...")
    with open(filepath, "rb") as f:
        try:
            data = msgpack.unpack(f)
        except ValueError as e:
            raise GraphFormatError(f"Not a msgpack graph snapshot: {filepath}") from e

    graph = graph_from_dict(data)
    logger.info(f"Loaded {graph.node_count():,} nodes and {graph.edge_count():,} edges")
    return graph
