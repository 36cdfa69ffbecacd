from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import FrozenSet, List, Optional

from intgraph.events import ADJACENCY_BUILT, ORDER_COMPUTED, Observer, emit
from intgraph.graph import Graph
from intgraph.recognition.adjacency import build_adjacency
from intgraph.recognition.arrangement import arrange_by_component
from intgraph.recognition.chordal import is_perfect_elimination_order
from intgraph.recognition.cliques import maximal_cliques
from intgraph.recognition.lexbfs import elimination_order

logger = logging.getLogger(__name__)


@dataclass
class Recognition:
    """Verdict of one run plus whatever intermediate structures it reached."""
    is_interval: bool
    order: List[int] = field(default_factory=list)
    chordal: Optional[bool] = None
    cliques: List[FrozenSet[int]] = field(default_factory=list)
    arrangement: Optional[List[FrozenSet[int]]] = None

    def __bool__(self) -> bool:
        return self.is_interval


class IntervalRecognizer:
    """
    Decides whether a graph is an interval graph: chordal, and its maximal
    cliques admit a consecutive arrangement.

    observer:  optional callback receiving RecognitionEvent objects
    max_steps: optional cap on clique-path search steps per component
    """

    def __init__(self, observer: Optional[Observer] = None, max_steps: Optional[int] = None):
        self.observer = observer
        self.max_steps = max_steps

    def recognize(self, graph: Graph) -> Recognition:
        if not graph.vertices:
            return Recognition(is_interval=True, chordal=True, arrangement=[])

        adjacency = build_adjacency(graph.vertices, graph.edges)
        emit(self.observer, ADJACENCY_BUILT, vertices=len(graph.vertices))

        order = elimination_order(graph.vertices, adjacency)
        logger.debug("elimination order %s", order)
        emit(self.observer, ORDER_COMPUTED, order=list(order))

        if not is_perfect_elimination_order(order, adjacency, self.observer):
            logger.debug("graph with %d vertices is not chordal", graph.n)
            return Recognition(is_interval=False, order=order, chordal=False)

        cliques = maximal_cliques(order, adjacency, self.observer)
        logger.debug("%d maximal cliques", len(cliques))

        arrangement = arrange_by_component(cliques, max_steps=self.max_steps, observer=self.observer)
        return Recognition(
            is_interval=arrangement is not None,
            order=order,
            chordal=True,
            cliques=cliques,
            arrangement=arrangement,
        )

    def __call__(self, graph: Graph) -> bool:
        return self.recognize(graph).is_interval


def recognize(graph: Graph, *, observer: Optional[Observer] = None, max_steps: Optional[int] = None) -> Recognition:
    return IntervalRecognizer(observer=observer, max_steps=max_steps).recognize(graph)


def is_interval_graph(graph: Graph, *, observer: Optional[Observer] = None) -> bool:
    return IntervalRecognizer(observer=observer)(graph)
