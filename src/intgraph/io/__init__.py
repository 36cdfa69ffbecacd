from intgraph.io.fixtures import dump_graph, graph_from_dict, graph_to_dict, load_fixture_dir, load_graph
