from __future__ import annotations
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Set, Tuple

Adjacency = Mapping[int, FrozenSet[int]]

_EMPTY: FrozenSet[int] = frozenset()


def build_adjacency(vertices: Iterable[int], edges: Iterable[Tuple[int, int]]) -> Adjacency:
    """
    Symmetric neighbor index. Direction is dropped, duplicate edges collapse
    and self-loops are ignored. Endpoints missing from `vertices` are still
    indexed so the index stays symmetric.
    Complexity: O(n + m).
    """
    adj: Dict[int, Set[int]] = {v: set() for v in vertices}
    for s, t in edges:
        if s == t:
            adj.setdefault(s, set())
            continue
        adj.setdefault(s, set()).add(t)
        adj.setdefault(t, set()).add(s)
    return MappingProxyType({v: frozenset(ns) for v, ns in adj.items()})


def neighbors(adjacency: Adjacency, v: int) -> FrozenSet[int]:
    """Neighbor set of v; unknown vertices have none."""
    return adjacency.get(v, _EMPTY)

