from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Dict, List, Optional

ADJACENCY_BUILT = "adjacency_built"
ORDER_COMPUTED = "order_computed"
NOT_CHORDAL = "not_chordal"
CLIQUES_COMPUTED = "cliques_computed"
CLIQUE_DISCARDED = "clique_discarded"
ARRANGEMENT_FOUND = "arrangement_found"
NO_ARRANGEMENT = "no_arrangement"


@dataclass(frozen=True)
class RecognitionEvent:
    kind: str
    data: Dict[str, Any] = field(default_factory=dict)


Observer = Callable[[RecognitionEvent], None]


def emit(observer: Optional[Observer], kind: str, **data: Any) -> None:
    if observer is not None:
        observer(RecognitionEvent(kind, data))


class EventRecorder:
    """Observer that keeps every event, in arrival order."""

    def __init__(self):
        self.events: List[RecognitionEvent] = []

    def __call__(self, event: RecognitionEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[str]:
        return [e.kind for e in self.events]

    def of_kind(self, kind: str) -> List[RecognitionEvent]:
        return [e for e in self.events if e.kind == kind]


class LoggingObserver:
    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("intgraph.trace")
        self.level = level

    def __call__(self, event: RecognitionEvent) -> None:
        self.logger.log(self.level, "%s %s", event.kind, event.data)
