"""
Data module.

Binary graph snapshots stored with msgpack.

Usage:
    from dotpath.data import load_graph, save_graph

    save_graph(graph, "data/graph.msgpack")
    graph = load_graph("data/graph.msgpack")
"""

from dotpath.data.store import load_graph, save_graph

__all__ = ["load_graph", "save_graph"]
