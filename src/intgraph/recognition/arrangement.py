"""Consecutive clique arrangements (Fulkerson-Gross).

A graph is an interval graph iff it is chordal and its maximal cliques can be
put in a line such that the cliques holding any one vertex are consecutive.
The search below looks for that line as a Hamiltonian path of the clique
intersection graph, pruning any extension that would reopen a vertex whose
run of cliques has already ended and skipping states already known to fail,
which bounds the work by 2^k * k for k cliques instead of k!.
"""
from __future__ import annotations
import logging
from typing import Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from intgraph.errors import SearchBudgetExceeded
from intgraph.events import ARRANGEMENT_FOUND, NO_ARRANGEMENT, Observer, emit

logger = logging.getLogger(__name__)

Clique = FrozenSet[int]


def clique_intersection_graph(cliques: Sequence[Clique]) -> Dict[int, List[int]]:
    """Index-based adjacency lists: i ~ j iff cliques i and j share a vertex."""
    k = len(cliques)
    graph: Dict[int, List[int]] = {i: [] for i in range(k)}
    for i in range(k):
        for j in range(i + 1, k):
            if cliques[i] & cliques[j]:
                graph[i].append(j)
                graph[j].append(i)
    return graph


def connected_components(graph: Dict[int, List[int]]) -> List[List[int]]:
    seen: Set[int] = set()
    comps: List[List[int]] = []
    for s in sorted(graph):
        if s in seen:
            continue
        seen.add(s)
        comp = [s]
        for u in comp:
            for w in graph[u]:
                if w not in seen:
                    seen.add(w)
                    comp.append(w)
        comps.append(sorted(comp))
    return comps


def is_connected(graph: Dict[int, List[int]]) -> bool:
    return len(connected_components(graph)) <= 1


def has_contiguous_runs(arrangement: Sequence[Clique]) -> bool:
    """Every vertex occupies positions {min, ..., max} with no gap."""
    spots: Dict[int, List[int]] = {}
    for i, clique in enumerate(arrangement):
        for v in clique:
            spots.setdefault(v, []).append(i)
    return all(p[-1] - p[0] + 1 == len(p) for p in spots.values())


def is_consecutive_arrangement(arrangement: Sequence[Clique]) -> bool:
    """Neighboring cliques intersect and every vertex's cliques are contiguous."""
    for a, b in zip(arrangement, arrangement[1:]):
        if not a & b:
            return False
    return has_contiguous_runs(arrangement)


class _StepBudget:
    def __init__(self, max_steps: Optional[int]):
        self.max_steps = max_steps
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchBudgetExceeded(self.max_steps)


def _path_from(
    start: int,
    cliques: Sequence[Clique],
    graph: Dict[int, List[int]],
    budget: _StepBudget,
    dead: Set[Tuple[int, int]],
) -> Optional[List[int]]:
    """
    Depth-first clique path from `start`. The closed vertices are the union
    of the visited cliques minus the last one, so (visited mask, last index)
    fixes the outcome of the rest of the search. Failed states go into
    `dead`, which the caller shares across starts.
    """
    k = len(cliques)
    path = [start]
    closed: Set[int] = set()

    def extend(mask: int) -> bool:
        budget.tick()
        if len(path) == k:
            return True
        last_i = path[-1]
        last = cliques[last_i]
        for j in graph[last_i]:
            if mask >> j & 1 or cliques[j] & closed:
                continue
            nmask = mask | (1 << j)
            if (nmask, j) in dead:
                continue
            ended = last - cliques[j]
            path.append(j)
            closed.update(ended)
            if extend(nmask):
                return True
            closed.difference_update(ended)
            path.pop()
        dead.add((mask, last_i))
        return False

    if (1 << start, start) in dead:
        return None
    return path if extend(1 << start) else None


def find_consecutive_arrangement(
    cliques: Sequence[Clique],
    *,
    max_steps: Optional[int] = None,
    observer: Optional[Observer] = None,
) -> Optional[List[Clique]]:
    """
    Order `cliques` so that every vertex's cliques are consecutive and
    neighbors in the order intersect, or return None if no such order exists.

    Tries every clique as the start; extensions prefer the largest overlap
    with the current end, then the lower index. Failed (visited, last)
    states are remembered across starts, so at most 2^k * k states are
    expanded for k cliques. `max_steps` bounds the number of search steps and
    raises SearchBudgetExceeded when crossed.
    """
    cliques = list(cliques)
    if len(cliques) <= 1:
        emit(observer, ARRANGEMENT_FOUND, arrangement=[sorted(c) for c in cliques])
        return cliques

    graph = clique_intersection_graph(cliques)
    if not is_connected(graph):
        logger.debug("clique intersection graph of %d cliques is disconnected", len(cliques))
        emit(observer, NO_ARRANGEMENT, reason="disconnected", cliques=len(cliques))
        return None
    for i, nbrs in graph.items():
        nbrs.sort(key=lambda j: (-len(cliques[i] & cliques[j]), j))

    budget = _StepBudget(max_steps)
    dead: Set[Tuple[int, int]] = set()
    for start in range(len(cliques)):
        path = _path_from(start, cliques, graph, budget, dead)
        if path is None:
            continue
        arrangement = [cliques[i] for i in path]
        if is_consecutive_arrangement(arrangement):
            logger.debug("clique path found from start %d after %d steps", start, budget.steps)
            emit(observer, ARRANGEMENT_FOUND, arrangement=[sorted(c) for c in arrangement], steps=budget.steps)
            return arrangement

    logger.debug("no clique path among %d cliques after %d steps", len(cliques), budget.steps)
    emit(observer, NO_ARRANGEMENT, reason="exhausted", cliques=len(cliques), steps=budget.steps)
    return None


def arrange_by_component(
    cliques: Sequence[Clique],
    *,
    max_steps: Optional[int] = None,
    observer: Optional[Observer] = None,
) -> Optional[List[Clique]]:
    """
    Arrange each connected component of the clique intersection graph on its
    own and concatenate the results. Components share no vertex, so the
    concatenation keeps every run contiguous.
    """
    cliques = list(cliques)
    out: List[Clique] = []
    for comp in connected_components(clique_intersection_graph(cliques)):
        part = find_consecutive_arrangement([cliques[i] for i in comp], max_steps=max_steps, observer=observer)
        if part is None:
            return None
        out.extend(part)
    return out
