from __future__ import annotations
from typing import Literal, Protocol
import networkx as nx

from intgraph.graph import Graph

TaskMode = Literal["binary"]

class GraphPropertyTask(Protocol):
    """
    A yes/no graph property a host can invoke.

    `run` is the host entry point and takes the plain Graph value;
    `label` is the dataset-side view on a networkx graph (1 = property holds).
    """
    name: str
    mode: TaskMode

    def run(self, graph: Graph) -> bool:
        ...

    def label(self, g: nx.Graph) -> int:
        ...
