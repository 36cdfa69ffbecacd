from __future__ import annotations
import networkx as nx

from intgraph.graph import Graph
from intgraph.recognition.adjacency import build_adjacency
from intgraph.recognition.chordal import is_perfect_elimination_order
from intgraph.recognition.lexbfs import elimination_order
from intgraph.registry import TASKS

@TASKS.register("chordal")
class ChordalTask:
    """Chordality alone: the first half of interval recognition."""
    name = "chordal"
    mode = "binary"

    def __init__(self, **_: object):
        pass

    def run(self, graph: Graph) -> bool:
        adjacency = build_adjacency(graph.vertices, graph.edges)
        return is_perfect_elimination_order(elimination_order(graph.vertices, adjacency), adjacency)

    def label(self, g: nx.Graph) -> int:
        return 1 if self.run(Graph.from_networkx(g)) else 0
