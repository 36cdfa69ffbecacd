"""Lexicographic breadth-first search with a fixed tie-break.

Every unvisited vertex carries a label, a sequence of integers. The vertex
with the lexicographically greatest label is visited next, and each of its
unvisited neighbors gets `n - step` appended to its label, so a neighbor of
an earlier visited vertex always outranks a neighbor of a later one. Among
equal labels the smallest vertex id is taken, which makes the order a pure
function of the graph.

For a chordal graph the reverse of a Lex-BFS order is a perfect elimination
ordering (Rose, Tarjan & Lueker, 1976).
"""
from __future__ import annotations
from typing import Dict, Iterable, List

from intgraph.recognition.adjacency import Adjacency, neighbors


def lex_bfs(vertices: Iterable[int], adjacency: Adjacency) -> List[int]:
    """
    Return the Lex-BFS visit order of `vertices`.
    Complexity: O(n^2 + n m) with plain labels; fine for the graph sizes the
    clique-path search can handle anyway.
    """
    labels: Dict[int, List[int]] = {v: [] for v in vertices}
    n = len(labels)
    order: List[int] = []
    for step in range(n):
        # greatest label first, then smallest id
        v = max(labels, key=lambda u: (labels[u], -u))
        order.append(v)
        del labels[v]
        for w in neighbors(adjacency, v):
            if w in labels:
                labels[w].append(n - step)
    return order


def elimination_order(vertices: Iterable[int], adjacency: Adjacency) -> List[int]:
    """Candidate perfect elimination ordering: Lex-BFS order reversed."""
    order = lex_bfs(vertices, adjacency)
    order.reverse()
    return order
