"""
Tests for the graphcore command-line runner.
"""

import textwrap

from graphcore.runner import main

CONFIG = """
vertices: [A, B, C, D, E]
edges:
  - {from: A, to: B, weight: 1}
  - {from: B, to: C, weight: 2}
  - {from: A, to: C, weight: 10}
  - {from: C, to: D, weight: 1}
queries:
  - {start: A, end: D}
  - {start: A, end: E}
"""


def _write(tmp_path, text):
    path = tmp_path / "graph.yml"
    path.write_text(textwrap.dedent(text))
    return path


def test_runner_prints_paths_and_mst(tmp_path, capsys):
    path = _write(tmp_path, CONFIG)

    assert main([str(path), "--mst"]) == 0
    out = capsys.readouterr().out

    assert "[graph] loaded 5 vertices and 4 edges" in out
    assert "[mst] 3 edges, total weight 4" in out
    assert "[path] A -> D: weight 4 via [A -- B (1) ; B -- C (2) ; C -- D (1)]" in out
    assert "[path] A -> E: no path" in out


def test_runner_skips_mst_by_default(tmp_path, capsys):
    path = _write(tmp_path, CONFIG)

    assert main([str(path)]) == 0
    assert "[mst]" not in capsys.readouterr().out


def test_runner_reports_invalid_graph(tmp_path, capsys):
    path = _write(tmp_path, "vertices: [A]\nedges:\n  - {from: A, to: B, weight: -1}\n")

    assert main([str(path)]) == 1
    assert "[run] failed" in capsys.readouterr().out


def test_runner_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yml")]) == 1
    assert "[run] failed" in capsys.readouterr().out


def test_runner_reports_malformed_vertices(tmp_path, capsys):
    path = _write(tmp_path, "vertices: 5\n")

    assert main([str(path)]) == 1
    assert "[run] failed" in capsys.readouterr().out
