"""
YAML run configuration for the graphcore runner.

A config file looks like::

    vertices: [A, B, C, D]
    edges:
      - {from: A, to: B, weight: 1}
      - {from: B, to: C, weight: 2}
    queries:
      - {start: A, end: C}
    frontier: LINEAR_SCAN
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Hashable, Mapping, Sequence

import yaml

from .edges import WeightedEdge
from .errors import ConfigError
from .graph import FrontierPolicy, Graph


@dataclass(frozen=True)
class EdgeConfig:
    source: Hashable
    target: Hashable
    weight: float


@dataclass(frozen=True)
class QueryConfig:
    start: Hashable
    end: Hashable


@dataclass(frozen=True)
class RunConfig:
    vertices: Sequence[Hashable]
    edges: Sequence[EdgeConfig]
    queries: Sequence[QueryConfig]
    frontier: FrontierPolicy = FrontierPolicy.LINEAR_SCAN

    def build_graph(self) -> Graph[Hashable, WeightedEdge]:
        return Graph(
            list(self.vertices),
            [WeightedEdge(e.source, e.target, e.weight) for e in self.edges],
        )


def load_config(path: Path) -> RunConfig:
    """Read and validate a run config from a YAML file."""
    try:
        data = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    return parse_config(data)


def parse_config(data: Any) -> RunConfig:
    """Validate an already-parsed config mapping."""
    if not isinstance(data, Mapping):
        raise ConfigError("config must be a mapping")
    if "vertices" not in data:
        raise ConfigError("config is missing 'vertices'")
    vertices = data["vertices"] or []
    if not isinstance(vertices, list):
        raise ConfigError("'vertices' must be a list")
    for vertex in vertices:
        _check_hashable("vertex", vertex)

    try:
        edges = [
            EdgeConfig(source=e["from"], target=e["to"], weight=float(e.get("weight", 1.0)))
            for e in data.get("edges") or []
        ]
        queries = [QueryConfig(start=q["start"], end=q["end"]) for q in data.get("queries") or []]
    except KeyError as exc:
        raise ConfigError(f"config entry is missing {exc.args[0]!r}") from exc
    except (AttributeError, TypeError, ValueError) as exc:
        raise ConfigError(f"malformed config entry: {exc}") from exc

    frontier_name = str(data.get("frontier", FrontierPolicy.LINEAR_SCAN.name))
    try:
        frontier = FrontierPolicy[frontier_name.upper()]
    except KeyError:
        raise ConfigError(f"unknown frontier policy: {frontier_name}") from None

    for e in edges:
        _check_hashable("edge 'from'", e.source)
        _check_hashable("edge 'to'", e.target)
    for q in queries:
        _check_hashable("query 'start'", q.start)
        _check_hashable("query 'end'", q.end)

    return RunConfig(
        vertices=list(vertices),
        edges=edges,
        queries=queries,
        frontier=frontier,
    )


def _check_hashable(label: str, value: Any) -> None:
    if not isinstance(value, Hashable):
        raise ConfigError(f"{label} {value!r} is not a scalar vertex name")
