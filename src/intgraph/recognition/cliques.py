"""Maximal cliques of a chordal graph from a perfect elimination ordering."""
from __future__ import annotations
import logging
from typing import Dict, FrozenSet, List, Optional, Sequence, Set

from intgraph.events import CLIQUE_DISCARDED, CLIQUES_COMPUTED, Observer, emit
from intgraph.recognition.adjacency import Adjacency, neighbors
from intgraph.recognition.chordal import right_neighbors

logger = logging.getLogger(__name__)

Clique = FrozenSet[int]


def elimination_tree(order: Sequence[int], adjacency: Adjacency):
    """
    Parent of v is its earliest later neighbor. Returns (right_neighbors,
    children, roots); children lists and roots follow `order`.
    """
    rn = right_neighbors(order, adjacency)
    children: Dict[int, List[int]] = {v: [] for v in order}
    roots: List[int] = []
    for v in order:
        if rn[v]:
            children[rn[v][0]].append(v)
        else:
            roots.append(v)
    return rn, children, roots


def maximal_cliques(
    order: Sequence[int],
    adjacency: Adjacency,
    observer: Optional[Observer] = None,
) -> List[Clique]:
    """
    Maximal cliques of a chordal graph, given a perfect elimination ordering.

    The candidate of v is {v} plus its later neighbors. A child u of v always
    has later neighbors inside {v} plus the later neighbors of v, so the
    candidate of u contains the candidate of v exactly when it has one more
    later neighbor; such a v is dropped. Every other candidate is maximal.
    Complexity: O(n + m) on top of the ordering.
    """
    rn, children, roots = elimination_tree(order, adjacency)
    cliques: List[Clique] = []
    seen: Set[Clique] = set()

    stack = list(reversed(roots))
    while stack:
        v = stack.pop()
        kids = children[v]
        candidate = frozenset([v, *rn[v]])
        absorbed_by = next((u for u in kids if len(rn[u]) == len(rn[v]) + 1), None)
        if absorbed_by is not None:
            logger.debug("candidate %s of %d is inside the candidate of %d", sorted(candidate), v, absorbed_by)
            emit(observer, CLIQUE_DISCARDED, vertex=v, clique=sorted(candidate), superset_of=absorbed_by)
        elif candidate not in seen:
            seen.add(candidate)
            cliques.append(candidate)
        stack.extend(reversed(kids))

    emit(observer, CLIQUES_COMPUTED, cliques=[sorted(c) for c in cliques])
    return cliques


def enumerate_maximal_cliques(adjacency: Adjacency) -> List[Clique]:
    """
    Exhaustive reference enumeration: grow every clique one higher-id vertex
    at a time, then keep the ones no outside vertex extends.
    Exponential; only meant as an oracle to cross-check `maximal_cliques`.
    """
    found: Set[Clique] = set()

    def grow(clique: Clique, candidates: List[int]) -> None:
        found.add(clique)
        for i, u in enumerate(candidates):
            nu = neighbors(adjacency, u)
            grow(clique | {u}, [w for w in candidates[i + 1:] if w in nu])

    for v in sorted(adjacency):
        grow(frozenset([v]), sorted(w for w in neighbors(adjacency, v) if w > v))

    out = []
    for c in found:
        common = None
        for u in c:
            nu = neighbors(adjacency, u)
            common = set(nu) if common is None else common & nu
        if not (common or set()) - c:
            out.append(c)
    return sorted(out, key=sorted)
