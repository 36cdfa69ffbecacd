import argparse
import logging
import numpy as np

from intgraph.events import LoggingObserver
from intgraph.graph import Graph
from intgraph.io.fixtures import load_graph
from intgraph.recognition.recognizer import IntervalRecognizer

def main():
    ap = argparse.ArgumentParser(description="Decide whether one graph is an interval graph.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--graph", help="Path to a JSON graph fixture")
    src.add_argument("--adj", help="Path to adjacency .npy (NxN)")
    ap.add_argument("--max-steps", type=int, default=None, help="Cap on clique-path search steps")
    ap.add_argument("--trace", action="store_true", help="Log every recognition event")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.trace else args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    graph = load_graph(args.graph) if args.graph else Graph.from_adjacency_matrix(np.load(args.adj))
    recognizer = IntervalRecognizer(
        observer=LoggingObserver() if args.trace else None,
        max_steps=args.max_steps,
    )
    res = recognizer.recognize(graph)

    print(f"vertices={graph.n} edges={graph.m}")
    print(f"chordal: {res.chordal}")
    print(f"maximal cliques: {[sorted(c) for c in res.cliques]}")
    print(f"interval: {res.is_interval}")

if __name__ == "__main__":
    main()
