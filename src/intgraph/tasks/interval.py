from __future__ import annotations
import networkx as nx

from intgraph.events import LoggingObserver
from intgraph.graph import Graph
from intgraph.recognition.recognizer import IntervalRecognizer
from intgraph.registry import TASKS

@TASKS.register("interval")
class IntervalTask:
    name = "interval"
    mode = "binary"

    def __init__(self, max_steps: int | None = None, trace: bool = False, **_: object):
        self.recognizer = IntervalRecognizer(
            observer=LoggingObserver() if trace else None,
            max_steps=max_steps,
        )

    def run(self, graph: Graph) -> bool:
        return self.recognizer(graph)

    def label(self, g: nx.Graph) -> int:
        return 1 if self.run(Graph.from_networkx(g)) else 0
