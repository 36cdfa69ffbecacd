from __future__ import annotations
from typing import Any
import random
import networkx as nx
from intgraph.registry import GRAPH_FAMILIES

@GRAPH_FAMILIES.register("erdos_renyi")
def erdos_renyi(n: int, p: float = 0.1, seed: int | None = None) -> nx.Graph:
    return nx.gnp_random_graph(n=n, p=p, seed=seed, directed=False)

@GRAPH_FAMILIES.register("cycle")
def cycle(n: int, **_: Any) -> nx.Graph:
    return nx.cycle_graph(n)

@GRAPH_FAMILIES.register("complete")
def complete(n: int, **_: Any) -> nx.Graph:
    return nx.complete_graph(n)

@GRAPH_FAMILIES.register("path")
def path(n: int, **_: Any) -> nx.Graph:
    return nx.path_graph(n)

@GRAPH_FAMILIES.register("random_tree")
def random_tree(n: int, seed: int | None = None) -> nx.Graph:
    if n < 2:
        return nx.empty_graph(n)
    rng = random.Random(seed)
    return nx.from_prufer_sequence([rng.randrange(n) for _ in range(n - 2)])

@GRAPH_FAMILIES.register("random_interval")
def random_interval(n: int, max_length: float = 0.2, seed: int | None = None) -> nx.Graph:
    """
    Intersection graph of n random closed intervals inside [0, 1].
    Interval by construction; handy as a positive class.
    """
    rng = random.Random(seed)
    spans = []
    for _ in range(n):
        a = rng.random()
        spans.append((a, a + rng.random() * max_length))
    g = nx.empty_graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            if spans[i][0] <= spans[j][1] and spans[j][0] <= spans[i][1]:
                g.add_edge(i, j)
    return g

@GRAPH_FAMILIES.register("sun")
def sun(n: int = 6, **_: Any) -> nx.Graph:
    """
    k-sun with k = max(3, n // 2): a complete core 0..k-1 and one ear per
    core edge (i, i+1), padded with isolated vertices up to n nodes.
    Chordal but never interval: the ears form an asteroidal triple.
    The smallest sun has 6 nodes, so n < 6 still yields 6.
    """
    k = max(3, n // 2)
    g = nx.complete_graph(k)
    for i in range(k):
        g.add_edge(k + i, i)
        g.add_edge(k + i, (i + 1) % k)
    g.add_nodes_from(range(2 * k, max(n, 2 * k)))
    return g
