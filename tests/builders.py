"""Small graph builders shared by the tests."""
import itertools

import networkx as nx

from intgraph.graph import Graph


def make(vertices, edges, directed=False):
    return Graph.from_edges(vertices, edges, directed=directed)


def complete(n):
    return make(range(1, n + 1), itertools.combinations(range(1, n + 1), 2))


def cycle(n):
    return make(range(1, n + 1), [(i, i % n + 1) for i in range(1, n + 1)])


def path(n):
    return make(range(1, n + 1), [(i, i + 1) for i in range(1, n)])


def is_caterpillar(tree: nx.Graph) -> bool:
    """A tree is an interval graph iff it is a caterpillar."""
    spine = tree.subgraph([v for v in tree if tree.degree(v) > 1])
    if spine.number_of_nodes() == 0:
        return True
    return nx.is_connected(spine) and max(d for _, d in spine.degree()) <= 2


# triangle 0-1-2 with ears 3 on (0,1), 4 on (1,2), 5 on (2,0)
SUN3 = make(range(6), [(0, 1), (1, 2), (2, 0), (3, 0), (3, 1), (4, 1), (4, 2), (5, 2), (5, 0)])

# triangle 0-1-2 with one pendant per corner
NET = make(range(6), [(0, 1), (1, 2), (2, 0), (0, 3), (1, 4), (2, 5)])

# triangle 0-1-2 with pendants on two corners
BULL = make(range(5), [(0, 1), (1, 2), (2, 0), (0, 3), (1, 4)])


def is_clique(vertices, adjacency) -> bool:
    vs = list(vertices)
    return all(w in adjacency.get(u, ()) for i, u in enumerate(vs) for w in vs[i + 1:])
