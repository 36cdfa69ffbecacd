"""
JSON graph fixtures.

Two layouts are read:

  host layout     {"vertexList": [{"id": 1}, ...],
                   "edgeList": [{"source": 1, "target": 2}, ...],
                   "isDirect": false}
  compact layout  {"vertices": [1, 2], "edges": [[1, 2]], "directed": false}

Only the compact layout is written.
"""
from __future__ import annotations
import json
import os
from typing import Any, Dict, Iterator, List, Tuple

from intgraph.errors import FixtureFormatError, GraphPreconditionError
from intgraph.graph import Graph


def _host_layout(obj: Dict[str, Any], source: str) -> Graph:
    vertices: List[Any] = []
    for item in obj.get("vertexList") or []:
        if not isinstance(item, dict) or "id" not in item:
            raise FixtureFormatError(source, f"vertexList entry without 'id': {item!r}")
        vertices.append(item["id"])
    edges = []
    for item in obj.get("edgeList") or []:
        if not isinstance(item, dict) or "source" not in item or "target" not in item:
            raise FixtureFormatError(source, f"edgeList entry needs 'source' and 'target': {item!r}")
        edges.append((item["source"], item["target"]))
    return Graph.from_edges(vertices, edges, directed=bool(obj.get("isDirect", False)))


def _compact_layout(obj: Dict[str, Any], source: str) -> Graph:
    edges = obj.get("edges") or []
    for e in edges:
        if not isinstance(e, (list, tuple)) or len(e) != 2:
            raise FixtureFormatError(source, f"edge must be a [source, target] pair: {e!r}")
    return Graph.from_edges(obj.get("vertices") or [], edges, directed=bool(obj.get("directed", False)))


def graph_from_dict(obj: Any, source: str = "<dict>") -> Graph:
    if not isinstance(obj, dict):
        raise FixtureFormatError(source, "top-level JSON value must be an object")
    try:
        if "vertexList" in obj:
            return _host_layout(obj, source)
        if "vertices" in obj:
            return _compact_layout(obj, source)
    except GraphPreconditionError as e:
        raise FixtureFormatError(source, str(e)) from e
    raise FixtureFormatError(source, "expected a 'vertexList' or 'vertices' key")


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    return {
        "vertices": list(graph.vertices),
        "edges": [list(e) for e in graph.edges],
        "directed": graph.directed,
    }


def load_graph(path: str) -> Graph:
    with open(path, "r", encoding="utf-8") as f:
        try:
            obj = json.load(f)
        except json.JSONDecodeError as e:
            raise FixtureFormatError(path, f"invalid JSON: {e}") from e
    return graph_from_dict(obj, source=path)


def dump_graph(graph: Graph, path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(graph_to_dict(graph), f, indent=2)


def load_fixture_dir(directory: str) -> Iterator[Tuple[str, Graph]]:
    """Yields (name, graph) for every *.json file, sorted by file name."""
    for fname in sorted(os.listdir(directory)):
        if fname.endswith(".json"):
            yield os.path.splitext(fname)[0], load_graph(os.path.join(directory, fname))
