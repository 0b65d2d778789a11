"""Tests for node-link JSON serialization."""

import json
from pathlib import Path

import pytest

from graphdiff.graph import (
    DiGraph,
    FrozenDict,
    Graph,
    graph_from_node_link,
    graph_to_node_link,
    load_graph,
    save_graph,
    symmetric_difference,
)


def test_save_and_load_preserves_node_handles(tmp_path: Path) -> None:
    graph = DiGraph(check_cycle=True, multigraph=False, attrs={"name": "g"})
    graph.add_nodes_from(["a", "b", "c"])
    graph.remove_node(0)
    graph.add_edge(2, 1, "x")
    path = tmp_path / "out" / "graph.json"

    save_graph(graph, path)
    loaded = load_graph(path)

    assert isinstance(loaded, DiGraph)
    assert loaded.node_indices() == [1, 2]
    assert loaded.nodes() == ["b", "c"]
    assert loaded.weighted_edge_list() == [(2, 1, "x")]
    assert loaded.multigraph is False
    assert loaded.check_cycle is True
    assert loaded.attrs == {"name": "g"}
    assert loaded.add_node("d") == 3


def test_undirected_orientation_survives_round_trip() -> None:
    graph = Graph()
    graph.add_nodes_from(["a", "b"])
    graph.add_edge(1, 0, "x")
    graph.add_edge(0, 1, "y")

    data = graph_to_node_link(graph)

    assert data["directed"] is False
    assert [(e["source"], e["target"], e["payload"]) for e in data["edges"]] == [
        (1, 0, "x"),
        (0, 1, "y"),
    ]
    assert graph_from_node_link(data).weighted_edge_list() == [(1, 0, "x"), (0, 1, "y")]


def test_links_key_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "graph.json"
    path.write_text(
        json.dumps(
            {
                "directed": True,
                "nodes": [{"id": 0, "payload": "a"}, {"id": 1, "payload": "b"}],
                "links": [{"source": 0, "target": 1, "payload": "x"}],
            }
        ),
        encoding="utf-8",
    )

    loaded = load_graph(path)

    assert loaded.multigraph is True
    assert loaded.weighted_edge_list() == [(0, 1, "x")]


def test_invalid_node_ids_are_rejected() -> None:
    with pytest.raises(ValueError):
        graph_from_node_link({"nodes": [{"id": "a"}]})
    with pytest.raises(ValueError):
        graph_from_node_link({"nodes": [{"id": 0}], "edges": [{"source": 0}]})


def test_json_object_payloads_load_as_hashable_values() -> None:
    data = {
        "directed": True,
        "nodes": [
            {"id": 0, "payload": {"name": "a", "tags": ["x", "y"]}},
            {"id": 1, "payload": {"name": "b", "tags": []}},
        ],
        "edges": [{"source": 0, "target": 1, "payload": {"w": 1}}],
    }

    first = graph_from_node_link(data)
    second = graph_from_node_link(data)

    assert isinstance(first.nodes()[0], FrozenDict)
    assert first.nodes()[0] == {"name": "a", "tags": ("x", "y")}
    assert hash(first.nodes()[0]) == hash(second.nodes()[0])
    with pytest.raises(TypeError):
        first.nodes()[0]["name"] = "changed"

    result = symmetric_difference(first, second)
    assert result.num_edges() == 0
    assert result.num_nodes() == 2


def test_json_object_payloads_are_written_back_as_plain_json() -> None:
    data = {
        "directed": False,
        "nodes": [{"id": 0, "payload": {"tags": ["x"]}}, {"id": 1, "payload": None}],
        "edges": [{"source": 0, "target": 1, "payload": {"w": [1, 2]}}],
    }

    written = graph_to_node_link(graph_from_node_link(data))

    assert written["nodes"][0]["payload"] == {"tags": ["x"]}
    assert type(written["nodes"][0]["payload"]) is dict
    assert written["edges"][0]["payload"] == {"w": [1, 2]}
    assert type(written["edges"][0]["payload"]["w"]) is list


def test_edge_to_undefined_node_is_rejected() -> None:
    data = {
        "directed": True,
        "nodes": [{"id": 0}, {"id": 1}],
        "edges": [{"source": 0, "target": 5}],
    }

    with pytest.raises(ValueError, match="not defined"):
        graph_from_node_link(data)


def test_unserializable_payload_leaves_no_output_file(tmp_path: Path) -> None:
    graph = DiGraph()
    graph.add_nodes_from(["a", object()])
    path = tmp_path / "out" / "graph.json"

    with pytest.raises(TypeError):
        save_graph(graph, path)

    assert not path.exists()
