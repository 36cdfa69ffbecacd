from intgraph.recognition.adjacency import build_adjacency, neighbors
from intgraph.recognition.arrangement import (
    arrange_by_component,
    clique_intersection_graph,
    find_consecutive_arrangement,
    is_consecutive_arrangement,
)
from intgraph.recognition.chordal import is_perfect_elimination_order, right_neighbors
from intgraph.recognition.cliques import enumerate_maximal_cliques, maximal_cliques
from intgraph.recognition.lexbfs import elimination_order, lex_bfs
from intgraph.recognition.recognizer import IntervalRecognizer, Recognition, is_interval_graph, recognize
