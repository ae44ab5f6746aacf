"""dinicflow: maximum flow with Dinic's algorithm.

Builds a directed capacitated network by edge insertion and computes its
maximum source-to-sink flow. Each Dinic phase layers the residual graph by
BFS and saturates the widest augmenting path of the level graph repeatedly
until none is left.

Primary API:
    DinicSolver - Solver owning a network; max_flow(), residual_graph(),
        progress_summary(), summary()
    FlowNetwork, FlowEdge - Network and arc data structures
    read_edge_list(), parse_edge_list() - Edge-list text input
    verify_flow() - Capacity and conservation checks
    from_networkx(), to_networkx() - NetworkX conversion

Example:
    from dinicflow import DinicSolver

    solver = DinicSolver.create(2, source=0, sink=1)
    solver.add_edge(0, 1, 5)
    assert solver.max_flow() == 5
"""

from __future__ import annotations

from dinicflow import cli, logging
from dinicflow._version import __version__
from dinicflow.config import DEFAULT_CONFIG, SolverConfig
from dinicflow.exceptions import (
    DinicFlowError,
    EdgeListFormatError,
    FlowInvariantError,
    InvalidCapacity,
    InvalidTopology,
    NetworkFrozenError,
)
from dinicflow.graph import FlowEdge, FlowNetwork
from dinicflow.io import network_to_edge_list, parse_edge_list, read_edge_list
from dinicflow.nx import EdgeMap, NodeMap, from_networkx, to_networkx
from dinicflow.results import EdgeState, FlowSummary, PhaseStats
from dinicflow.solver import DinicSolver, SolveState
from dinicflow.verify import FlowVerification, verify_flow

__all__ = [
    # Version
    "__version__",
    # Model
    "FlowEdge",
    "FlowNetwork",
    # Solver
    "DinicSolver",
    "SolveState",
    "SolverConfig",
    "DEFAULT_CONFIG",
    # Results
    "EdgeState",
    "FlowSummary",
    "PhaseStats",
    "FlowVerification",
    "verify_flow",
    # Errors
    "DinicFlowError",
    "InvalidTopology",
    "InvalidCapacity",
    "FlowInvariantError",
    "NetworkFrozenError",
    "EdgeListFormatError",
    # I/O
    "parse_edge_list",
    "read_edge_list",
    "network_to_edge_list",
    # Library integrations (NetworkX)
    "EdgeMap",
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
