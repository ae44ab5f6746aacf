"""Command-line interface for dinicflow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from dinicflow.exceptions import DinicFlowError
from dinicflow.io import read_edge_list
from dinicflow.logging import get_logger, set_global_log_level
from dinicflow.solver import DinicSolver
from dinicflow.verify import verify_flow

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _solve_file(
    path: Path,
    source: Optional[int],
    sink: Optional[int],
    results: Optional[Path],
    stdout: bool,
    verify: bool,
    show_edges: bool,
) -> None:
    """Read an edge-list file, compute the max flow and report it.

    Args:
        path: Edge-list file.
        source: Optional source override (default node 0).
        sink: Optional sink override (default last node).
        results: Optional path for a JSON results file.
        stdout: Also print the JSON results to stdout.
        verify: Run capacity/conservation verification.
        show_edges: Print every user edge carrying positive flow.
    """
    start = perf_counter()
    try:
        network = read_edge_list(path, source=source, sink=sink)
        build_time = perf_counter() - start
        print(
            f"Network: {network.num_nodes} nodes, {network.num_edges} edges "
            f"(built in {_format_duration(build_time)})"
        )

        solver = DinicSolver(network)
        solve_start = perf_counter()
        max_flow = solver.max_flow()
        solve_time = perf_counter() - solve_start

        print(f"Maximum flow: {max_flow}")
        print(f"Computation time: {_format_duration(solve_time)}")
        print()
        print(solver.progress_summary())

        flow_edges = [e for e in network.forward_edges() if e.flow > 0]
        print()
        print(f"Flow summary: {len(flow_edges)} edges have positive flow")
        if show_edges:
            for edge in flow_edges:
                print("  " + edge.describe(network.source, network.sink))

        results_dict: Dict[str, Any] = solver.summary().to_dict()
        if verify:
            verification = verify_flow(network)
            print()
            print(verification.report())
            results_dict["verification"] = verification.to_dict()
            if not verification.ok:
                logger.error("Flow verification failed")

        if results is not None or stdout:
            json_str = json.dumps(results_dict, indent=2)
            if results is not None:
                results.parent.mkdir(parents=True, exist_ok=True)
                logger.info(f"Writing results to: {results}")
                results.write_text(json_str)
                print(f"✅ Results written to: {results}")
            if stdout:
                print(json_str)

        logger.info(
            f"Run completed successfully in {_format_duration(perf_counter() - start)}"
        )

    except FileNotFoundError:
        logger.error(f"Network file not found: {path}")
        print(f"❌ ERROR: Network file not found: {path}")
        sys.exit(1)
    except DinicFlowError as e:
        logger.error(f"Invalid network: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Invalid network: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect_file(path: Path, source: Optional[int], sink: Optional[int]) -> None:
    """Print structural statistics of an edge-list file without solving."""
    try:
        network = read_edge_list(path, source=source, sink=sink)
    except FileNotFoundError:
        logger.error(f"Network file not found: {path}")
        print(f"❌ ERROR: Network file not found: {path}")
        sys.exit(1)
    except DinicFlowError as e:
        logger.error(f"Invalid network: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Invalid network: {type(e).__name__}: {e}")
        sys.exit(1)

    out_degrees = [
        sum(1 for e in network.out_edges(n) if not e.is_residual())
        for n in range(network.num_nodes)
    ]
    source_capacity = sum(
        e.capacity for e in network.out_edges(network.source) if not e.is_residual()
    )
    sink_capacity = sum(
        e.capacity for e in network.forward_edges() if e.dst == network.sink
    )
    rows = [
        ["Nodes", str(network.num_nodes)],
        ["Edges", str(network.num_edges)],
        ["Source", str(network.source)],
        ["Sink", str(network.sink)],
        ["Total capacity", str(network.total_capacity)],
        ["Source out-capacity", str(source_capacity)],
        ["Sink in-capacity", str(sink_capacity)],
        ["Max out-degree", str(max(out_degrees))],
        ["Isolated nodes", str(sum(1 for n in network.adjacency if not n))],
    ]
    print(f"Network file: {path}")
    print(_format_table(["Property", "Value"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``dinicflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="dinicflow",
        description="Compute maximum flow of edge-list networks with Dinic's algorithm.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Compute the maximum flow")
    solve_parser.add_argument("network", type=Path, help="Path to edge-list file")
    solve_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to this JSON file",
    )
    solve_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print JSON results to stdout",
    )
    solve_parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip capacity and conservation verification",
    )
    solve_parser.add_argument(
        "--edges",
        action="store_true",
        help="List every edge carrying positive flow",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show network statistics without solving"
    )
    inspect_parser.add_argument("network", type=Path, help="Path to edge-list file")

    for p in (solve_parser, inspect_parser):
        p.add_argument(
            "--source", "-s", type=int, default=None, help="Source node (default: 0)"
        )
        p.add_argument(
            "--sink", "-t", type=int, default=None, help="Sink node (default: N-1)"
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "solve":
        _solve_file(
            path=args.network,
            source=args.source,
            sink=args.sink,
            results=args.results,
            stdout=args.stdout,
            verify=not args.no_verify,
            show_edges=args.edges,
        )
    elif args.command == "inspect":
        _inspect_file(args.network, args.source, args.sink)


if __name__ == "__main__":
    main()
