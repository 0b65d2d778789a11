"""Tests for graphdiff CLI entrypoints."""

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

import graphdiff.main as main
from graphdiff.cli import symdiff as symdiff_module
from graphdiff.graph import DiGraph, Graph, load_graph, save_graph


def _write_digraph(path: Path, nodes, edges) -> Path:
    graph = DiGraph()
    graph.add_nodes_from(nodes)
    graph.add_edges_from(edges)
    save_graph(graph, path)
    return path


def _args(first: Path, second: Path, output: Path, **overrides) -> SimpleNamespace:
    values = {
        "first": str(first),
        "second": str(second),
        "output": str(output),
        "strict": None,
        "clone": None,
        "config": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def _quiet_console() -> Console:
    return Console(quiet=True)


def test_main_dispatches_symdiff_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Verify that `main` parses args and dispatches symdiff_command."""
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    captured: dict[str, object] = {}

    def fake_symdiff_command(args, console=None) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "symdiff_command", fake_symdiff_command)

    exit_code = main.main(
        ["symdiff", "a.json", "b.json", "-o", str(tmp_path / "out.json"), "--permissive"]
    )

    assert exit_code == 0
    parsed = captured["args"]
    assert parsed.first == "a.json"
    assert parsed.second == "b.json"
    assert parsed.strict is False


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure missing subcommands make the CLI print help and fail."""
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)

    exit_code = main.main([])

    assert exit_code == 1
    assert "Graphdiff" in capsys.readouterr().out


def test_symdiff_writes_result(tmp_path: Path) -> None:
    first = _write_digraph(tmp_path / "a.json", ["a", "b"], [(0, 1, "x")])
    second = _write_digraph(tmp_path / "b.json", ["a", "b"], [(1, 0, "y")])
    output = tmp_path / "out.json"

    exit_code = symdiff_module.symdiff_command(
        _args(first, second, output), console=_quiet_console()
    )

    assert exit_code == 0
    result = load_graph(output)
    assert result.multigraph is True
    assert result.weighted_edge_list() == [(0, 1, "x"), (1, 0, "y")]


def test_symdiff_strict_mismatch_fails(tmp_path: Path) -> None:
    first = _write_digraph(tmp_path / "a.json", ["a", "b"], [(0, 1, "x")])
    second = _write_digraph(tmp_path / "b.json", ["a", "b", "c"], [(0, 2, "y")])
    output = tmp_path / "out.json"

    exit_code = symdiff_module.symdiff_command(
        _args(first, second, output), console=_quiet_console()
    )

    assert exit_code == 1
    assert not output.exists()


def test_symdiff_permissive_reports_missing_endpoint(tmp_path: Path) -> None:
    first = _write_digraph(tmp_path / "a.json", ["a", "b"], [(0, 1, "x")])
    second = _write_digraph(tmp_path / "b.json", ["a", "b", "c"], [(0, 2, "y")])
    output = tmp_path / "out.json"

    exit_code = symdiff_module.symdiff_command(
        _args(first, second, output, strict=False), console=_quiet_console()
    )

    assert exit_code == 1
    assert not output.exists()


def test_symdiff_config_file_is_honoured(tmp_path: Path) -> None:
    first = _write_digraph(tmp_path / "a.json", ["a", "b"], [(0, 1, "x")])
    second = _write_digraph(tmp_path / "b.json", ["a", "b", "c"], [(1, 0, "y")])
    config = tmp_path / "graphdiff.toml"
    config.write_text("enforce_identical_node_sets = false\n", encoding="utf-8")
    output = tmp_path / "out.json"

    exit_code = symdiff_module.symdiff_command(
        _args(first, second, output, config=str(config)), console=_quiet_console()
    )

    assert exit_code == 0
    assert load_graph(output).num_nodes() == 2


def test_symdiff_rejects_mixed_directedness(tmp_path: Path) -> None:
    first = _write_digraph(tmp_path / "a.json", ["a"], [])
    undirected = Graph()
    undirected.add_node("a")
    second = tmp_path / "b.json"
    save_graph(undirected, second)

    exit_code = symdiff_module.symdiff_command(
        _args(first, second, tmp_path / "out.json"), console=_quiet_console()
    )

    assert exit_code == 2


def test_symdiff_missing_input_fails(tmp_path: Path) -> None:
    exit_code = symdiff_module.symdiff_command(
        _args(tmp_path / "nope.json", tmp_path / "nope2.json", tmp_path / "out.json"),
        console=_quiet_console(),
    )

    assert exit_code == 1


def _write_document(path: Path, nodes, edges) -> Path:
    path.write_text(
        json.dumps({"directed": True, "nodes": nodes, "edges": edges}), encoding="utf-8"
    )
    return path


def test_symdiff_accepts_json_object_payloads(tmp_path: Path) -> None:
    nodes = [{"id": 0, "payload": {"name": "a"}}, {"id": 1, "payload": {"name": "b"}}]
    first = _write_document(
        tmp_path / "a.json", nodes, [{"source": 0, "target": 1, "payload": {"w": 1}}]
    )
    second = _write_document(
        tmp_path / "b.json", nodes, [{"source": 0, "target": 1, "payload": {"w": 2}}]
    )
    output = tmp_path / "out.json"

    exit_code = symdiff_module.symdiff_command(
        _args(first, second, output), console=_quiet_console()
    )

    assert exit_code == 0
    written = json.loads(output.read_text(encoding="utf-8"))
    assert [node["payload"] for node in written["nodes"]] == [{"name": "a"}, {"name": "b"}]
    assert sorted(edge["payload"]["w"] for edge in written["edges"]) == [1, 2]


def test_symdiff_edge_to_undefined_node_fails(tmp_path: Path) -> None:
    nodes = [{"id": 0, "payload": "a"}, {"id": 1, "payload": "b"}]
    first = _write_document(tmp_path / "a.json", nodes, [{"source": 0, "target": 5}])
    second = _write_document(tmp_path / "b.json", nodes, [])
    output = tmp_path / "out.json"

    exit_code = symdiff_module.symdiff_command(
        _args(first, second, output), console=_quiet_console()
    )

    assert exit_code == 1
    assert not output.exists()
