"""
CLI to compute minimum spanning trees and shortest paths for a YAML graph.

Reads a run config (see graphcore.config), builds the graph, optionally
prints its minimum spanning tree, then answers each shortest-path query.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence
import argparse
import logging
import time

from .errors import GraphCoreError, NoPathExistsError
from .config import load_config
from .graph import path_weight

logger = logging.getLogger(__name__)


def _format_edge(edge) -> str:
    return f"{edge.vertex1!s} -- {edge.vertex2!s} ({edge.weight:g})"


def run(config_path: Path, show_mst: bool = False) -> int:
    cfg = load_config(config_path)
    start = time.time()
    graph = cfg.build_graph()
    print(f"[graph] loaded {graph.num_vertices()} vertices and {graph.num_edges()} edges")

    if show_mst:
        tree = sorted(graph.minimum_spanning_tree(), key=lambda e: (e.weight, str(e.vertex1), str(e.vertex2)))
        for edge in tree:
            print(f"[mst] {_format_edge(edge)}")
        print(f"[mst] {len(tree)} edges, total weight {path_weight(tree):g}")

    for query in cfg.queries:
        try:
            path = graph.shortest_path(query.start, query.end, frontier=cfg.frontier)
        except NoPathExistsError:
            print(f"[path] {query.start!s} -> {query.end!s}: no path")
            continue
        hops = " ; ".join(_format_edge(e) for e in path)
        print(f"[path] {query.start!s} -> {query.end!s}: weight {path_weight(path):g} via [{hops}]")

    logger.debug("run finished in %.3fs", time.time() - start)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Spanning trees and shortest paths over a weighted graph")
    parser.add_argument("config", type=Path, help="YAML graph/run config")
    parser.add_argument("--mst", action="store_true", help="Print the minimum spanning tree")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    try:
        return run(args.config, show_mst=args.mst)
    except (GraphCoreError, OSError) as exc:
        print(f"[run] failed: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
