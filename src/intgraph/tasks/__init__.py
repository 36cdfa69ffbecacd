from intgraph.tasks import chordal, interval  # noqa: F401  (registers tasks)
