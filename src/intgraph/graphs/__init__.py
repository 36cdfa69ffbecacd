from intgraph.graphs import families  # noqa: F401  (registers families)
from intgraph.graphs.sampler import GraphSampler, GraphSourceSpec
