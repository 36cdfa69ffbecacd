from __future__ import annotations
import logging
from typing import Dict, List, Optional, Sequence

from intgraph.errors import GraphPreconditionError
from intgraph.events import NOT_CHORDAL, Observer, emit
from intgraph.recognition.adjacency import Adjacency, neighbors

logger = logging.getLogger(__name__)


def positions(order: Sequence[int]) -> Dict[int, int]:
    pos = {v: i for i, v in enumerate(order)}
    if len(pos) != len(order):
        raise GraphPreconditionError("elimination order repeats a vertex")
    return pos


def right_neighbors(order: Sequence[int], adjacency: Adjacency) -> Dict[int, List[int]]:
    """
    For every vertex, its neighbors that come later in `order`, sorted by
    position. Neighbors that are not part of the order are ignored.
    """
    pos = positions(order)
    out: Dict[int, List[int]] = {}
    for v in order:
        later = [w for w in neighbors(adjacency, v) if pos.get(w, -1) > pos[v]]
        later.sort(key=pos.__getitem__)
        out[v] = later
    return out


def is_perfect_elimination_order(
    order: Sequence[int],
    adjacency: Adjacency,
    observer: Optional[Observer] = None,
) -> bool:
    """
    True iff the later neighbors of every vertex form a clique.

    Uses the parent test: with p the earliest later neighbor of v, the other
    later neighbors of v must all be later neighbors of p. This is equivalent
    to the clique test and runs in O(n + m).
    Stops at the first vertex whose later neighbors are not a clique.
    """
    rn = right_neighbors(order, adjacency)
    for v in order:
        later = rn[v]
        if len(later) <= 1:
            continue
        parent = later[0]
        parent_later = set(rn[parent])
        for u in later[1:]:
            if u not in parent_later:
                logger.debug("vertex %d: later neighbors %d and %d are not adjacent", v, parent, u)
                emit(observer, NOT_CHORDAL, vertex=v, pair=(parent, u))
                return False
    return True
