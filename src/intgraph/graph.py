from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Set, Tuple

import networkx as nx
import numpy as np

from intgraph.errors import GraphPreconditionError

Edge = Tuple[int, int]


def _check_id(value: Any, what: str) -> int:
    # bool is an int subclass but never a valid vertex id
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise GraphPreconditionError(f"{what} must be an integer vertex id, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class Graph:
    """
    Host-side graph value handed to the recognizer.

    vertices: unique integer ids
    edges:    ordered (source, target) pairs
    directed: kept for the host's sake only; recognition treats every edge
              as mutual adjacency.
    """
    vertices: Tuple[int, ...]
    edges: Tuple[Edge, ...] = field(default=())
    directed: bool = False

    def __post_init__(self):
        if self.vertices is None:
            raise GraphPreconditionError("vertex collection is None")
        if self.edges is None:
            raise GraphPreconditionError("edge collection is None")

        vertices = tuple(_check_id(v, "vertex") for v in self.vertices)
        if len(set(vertices)) != len(vertices):
            raise GraphPreconditionError("vertex ids must be unique")

        edges: List[Edge] = []
        for e in self.edges:
            if e is None or len(e) != 2:
                raise GraphPreconditionError(f"edge must be a (source, target) pair, got {e!r}")
            edges.append((_check_id(e[0], "edge source"), _check_id(e[1], "edge target")))

        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "edges", tuple(edges))
        object.__setattr__(self, "directed", bool(self.directed))

    @property
    def n(self) -> int:
        return len(self.vertices)

    @property
    def m(self) -> int:
        return len(self.edges)

    @classmethod
    def from_edges(cls, vertices: Iterable[int], edges: Iterable[Edge], directed: bool = False) -> "Graph":
        if vertices is None or edges is None:
            raise GraphPreconditionError("vertices and edges must not be None")
        return cls(tuple(vertices), tuple(tuple(e) for e in edges), directed)

    @classmethod
    def from_networkx(cls, g: nx.Graph) -> "Graph":
        """Non-integer node labels are relabeled to 0..n-1 in node order."""
        if not all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in g.nodes):
            g = nx.convert_node_labels_to_integers(g)
        return cls(tuple(g.nodes), tuple(g.edges), g.is_directed())

    @classmethod
    def from_adjacency_matrix(cls, adj: np.ndarray) -> "Graph":
        adj = np.asarray(adj)
        if adj.ndim != 2 or adj.shape[0] != adj.shape[1]:
            raise GraphPreconditionError(f"adjacency matrix must be square, got shape {adj.shape}")
        n = adj.shape[0]
        # symmetrize first: a one-sided entry is still an edge
        upper = np.triu((adj != 0) | (adj.T != 0), k=1)
        rows, cols = np.nonzero(upper)
        return cls(tuple(range(n)), tuple(zip(rows.tolist(), cols.tolist())), False)

    def to_networkx(self) -> nx.Graph:
        g = nx.Graph()
        g.add_nodes_from(self.vertices)
        g.add_edges_from((s, t) for s, t in self.edges if s != t)
        return g


def neighbors_of(graph: Graph, vertex_id: int) -> Set[int]:
    """
    Neighbors of one vertex as the host model reports them: targets of
    outgoing edges, plus sources of incoming edges when the graph is
    undirected.
    """
    out: Set[int] = set()
    for s, t in graph.edges:
        if s == vertex_id:
            out.add(t)
        elif t == vertex_id and not graph.directed:
            out.add(s)
    return out
