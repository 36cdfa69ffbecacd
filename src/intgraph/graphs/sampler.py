from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple
import random
import networkx as nx
from intgraph.registry import GRAPH_FAMILIES

@dataclass
class GraphSourceSpec:
    family: str
    params: Dict[str, Any] = field(default_factory=dict)
    weight: float = 1.0

class GraphSampler:
    """Draws graphs from a weighted mix of registered families."""

    def __init__(self, sources: List[GraphSourceSpec], seed: int = 0):
        if not sources:
            raise ValueError("GraphSampler needs at least one source")
        for s in sources:
            GRAPH_FAMILIES.get(s.family)
            if s.weight < 0:
                raise ValueError(f"negative weight for family '{s.family}'")
        self.sources = sources
        self.rng = random.Random(seed)
        weights = [s.weight for s in sources]
        total = sum(weights)
        self.weights = [w / total for w in weights] if total > 0 else [1.0] * len(sources)

    def sample(self, n: int, seed: int | None = None) -> Tuple[str, nx.Graph]:
        spec = self.rng.choices(self.sources, weights=self.weights, k=1)[0]
        fn = GRAPH_FAMILIES.get(spec.family)
        kwargs = dict(spec.params)
        kwargs["seed"] = seed
        return spec.family, fn(n=n, **kwargs)

    def sample_many(self, count: int, n: int, seed: int = 0) -> Iterator[Tuple[str, nx.Graph]]:
        """Yields (graph_id, graph); ids look like 'random_interval_0007'."""
        for i in range(count):
            family, g = self.sample(n, seed=seed + i)
            yield f"{family}_{i:04d}", g
