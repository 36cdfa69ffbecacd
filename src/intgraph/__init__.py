"""Interval graph recognition (Lex-BFS, elimination tree, clique paths)."""
from intgraph.errors import FixtureFormatError, GraphPreconditionError, IntGraphError, SearchBudgetExceeded
from intgraph.events import EventRecorder, LoggingObserver, RecognitionEvent
from intgraph.graph import Graph
from intgraph.recognition import IntervalRecognizer, Recognition, is_interval_graph, recognize

__version__ = "0.1.0"
