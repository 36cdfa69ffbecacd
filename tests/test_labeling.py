"""Tests for labeling.py"""

import networkx as nx
import pandas as pd

import intgraph.tasks  # noqa: F401
from builders import SUN3, cycle, path
from intgraph.labeling import FIELDNAMES, OVER_BUDGET, label_graphs, label_to_csv
from intgraph.registry import TASKS


def test_label_graphs_rows():
    task = TASKS.create("interval")
    rows = list(label_graphs([("p4", path(4)), ("c5", nx.cycle_graph(5))], task))
    assert [r["graph_id"] for r in rows] == ["p4", "c5"]
    assert [r["result"] for r in rows] == [1, 0]
    assert rows[1]["n"] == 5 and rows[1]["m"] == 5
    assert all(r["time_ms"] >= 0 for r in rows)


def test_label_to_csv(tmp_path):
    out = tmp_path / "runs" / "labels.csv"
    task = TASKS.create("interval")
    df = label_to_csv([("a", path(3)), ("b", cycle(4)), ("c", path(1))], task, str(out), total=3)
    assert list(df.columns) == FIELDNAMES
    assert df["result"].tolist() == [1, 0, 1]

    back = pd.read_csv(out)
    assert back["graph_id"].tolist() == ["a", "b", "c"]
    assert back["result"].tolist() == [1, 0, 1]


def test_over_budget_graph_does_not_stop_the_run(tmp_path, caplog):
    task = TASKS.create("interval", max_steps=1)
    out = tmp_path / "labels.csv"
    with caplog.at_level("WARNING", logger="intgraph.labeling"):
        df = label_to_csv([("sun", SUN3), ("p1", path(1))], task, str(out))
    assert df["result"].tolist() == [OVER_BUDGET, 1]
    assert pd.read_csv(out)["graph_id"].tolist() == ["sun", "p1"]
    assert any("sun" in r.getMessage() for r in caplog.records)
