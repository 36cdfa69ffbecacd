from __future__ import annotations


class IntGraphError(Exception):
    """Base class for every error raised by intgraph."""


class GraphPreconditionError(IntGraphError, ValueError):
    """The caller handed over a graph that violates the input contract."""


class FixtureFormatError(IntGraphError, ValueError):
    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class SearchBudgetExceeded(IntGraphError, RuntimeError):
    """Raised when the clique-path search runs past its step cap."""

    def __init__(self, steps: int):
        super().__init__(f"clique arrangement search exceeded {steps} steps")
        self.steps = steps
