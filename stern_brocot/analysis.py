"""In-memory views of a NodeStore for inspection and statistics.

  tree_graph             networkx.DiGraph of origin -> child links
  depth_histogram        number of stored fractions per depth k
  coefficient_histogram  number of stored fractions per last coefficient u

These read the arena as it is; they never build nodes.
"""

from __future__ import annotations

import networkx as nx
import numpy as np

from .core import NodeStore


def tree_graph(store: NodeStore) -> nx.DiGraph:
    """Build the directed origin -> child graph of every stored node.

    Graph nodes are node ids with attributes p, q, u, k and a "label"
    string "p/q".  The result is a branching: 0/1 is isolated and every
    other node hangs below 1/0.
    """
    G = nx.DiGraph()
    for node in store:
        G.add_node(
            node.node_id,
            p=node.p,
            q=node.q,
            u=node.u,
            k=node.k,
            label=f"{node.p}/{node.q}",
        )
    for node in store:
        if node.origin is not None:
            G.add_edge(node.origin, node.node_id)
    return G


def depth_histogram(store: NodeStore) -> np.ndarray:
    """counts[k] = number of stored fractions of depth k (roots excluded)."""
    depths = np.asarray([int(n.k) for n in store if not n.is_root()], dtype=np.int64)
    return np.bincount(depths)


def coefficient_histogram(store: NodeStore) -> np.ndarray:
    """counts[u] = number of stored fractions whose last coefficient is u."""
    coefficients = np.asarray([int(n.u) for n in store if not n.is_root()], dtype=np.int64)
    return np.bincount(coefficients)
