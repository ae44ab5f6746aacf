"""Maximum-flow computation via Dinic's algorithm.

Each phase builds a BFS level graph from the source and then repeatedly pushes
flow along the widest (max-bottleneck) source-to-sink path inside it until the
level graph is exhausted. The run ends when the sink is no longer reachable in
the residual graph; the accumulated flow is then maximum.

Example:
    >>> solver = DinicSolver.create(4, source=0, sink=3)
    >>> solver.add_edge(0, 1, 10)
    0
    >>> solver.add_edge(0, 2, 5)
    2
    >>> solver.add_edge(1, 3, 5)
    4
    >>> solver.add_edge(2, 3, 10)
    6
    >>> solver.max_flow()
    10
"""

from __future__ import annotations

from enum import IntEnum
from time import perf_counter
from typing import List, Optional, Tuple

from dinicflow.algorithms.bottleneck import SearchScratch, augment_max_bottleneck_path
from dinicflow.algorithms.levels import UNREACHED, build_level_graph
from dinicflow.config import DEFAULT_CONFIG, SolverConfig
from dinicflow.graph.network import FlowNetwork
from dinicflow.logging import get_logger
from dinicflow.results import EdgeState, FlowSummary, PhaseStats

logger = get_logger(__name__)


class SolveState(IntEnum):
    """Lifecycle of a solver instance. ``SOLVED`` is terminal."""

    NOT_SOLVED = 1
    SOLVING = 2
    SOLVED = 3


class DinicSolver:
    """Dinic's max-flow solver with max-bottleneck path selection.

    The solver owns the network once constructed. Solving freezes the network,
    mutates edge flows in place and runs at most once; every query after that
    returns the stored result.

    Not safe for concurrent use: the level array and search scratch arrays are
    shared by all phases of one instance.
    """

    def __init__(
        self, network: FlowNetwork, config: Optional[SolverConfig] = None
    ) -> None:
        self.network = network
        self.config = config or DEFAULT_CONFIG
        self.state = SolveState.NOT_SOLVED
        self.total_flow = 0

        n = network.num_nodes
        self._level: List[int] = [UNREACHED] * n
        self._scratch = SearchScratch(n)
        self._phases: List[PhaseStats] = []

    @classmethod
    def create(
        cls,
        num_nodes: int,
        source: int,
        sink: int,
        config: Optional[SolverConfig] = None,
    ) -> DinicSolver:
        """Create a solver over a new empty network.

        Raises:
            InvalidTopology: If ``source``/``sink`` are out of range or equal.
        """
        return cls(FlowNetwork(num_nodes, source, sink), config=config)

    def add_edge(self, src: int, dst: int, capacity: int) -> int:
        """Insert an edge into the underlying network. See ``FlowNetwork.add_edge``."""
        return self.network.add_edge(src, dst, capacity)

    @property
    def solved(self) -> bool:
        return self.state is SolveState.SOLVED

    def solve(self) -> None:
        """Run Dinic's algorithm to completion. No-op once solved."""
        if self.state is not SolveState.NOT_SOLVED:
            return

        network = self.network
        network.freeze()
        self.state = SolveState.SOLVING
        # Strictly larger than any flow the network can carry
        infinity = network.total_capacity + 1
        progress_interval = self.config.progress_interval

        logger.info(
            "Starting Dinic's algorithm: %d nodes, %d edges, source=%d, sink=%d",
            network.num_nodes,
            network.num_edges,
            network.source,
            network.sink,
        )
        run_start = perf_counter()

        while build_level_graph(network, self._level, self.config.early_exit_bfs):
            phase_index = len(self._phases) + 1
            logger.debug("Phase %d: level graph built", phase_index)

            phase_start = perf_counter()
            path_count = 0
            phase_flow = 0
            pushed = augment_max_bottleneck_path(
                network, self._level, self._scratch, infinity
            )
            while pushed != 0:
                self.total_flow += pushed
                phase_flow += pushed
                path_count += 1
                if path_count % progress_interval == 0:
                    logger.info(
                        "Phase %d: found %d paths so far", phase_index, path_count
                    )
                pushed = augment_max_bottleneck_path(
                    network, self._level, self._scratch, infinity
                )

            elapsed = perf_counter() - phase_start
            self._phases.append(
                PhaseStats(
                    index=phase_index, paths=path_count, flow=phase_flow, elapsed=elapsed
                )
            )
            logger.info(
                "Phase %d: %d paths adding %d flow, total flow %d (%.3f s)",
                phase_index,
                path_count,
                phase_flow,
                self.total_flow,
                elapsed,
            )

        self.state = SolveState.SOLVED
        logger.info(
            "Dinic's algorithm completed: max flow %d in %d phases (%.3f s)",
            self.total_flow,
            len(self._phases),
            perf_counter() - run_start,
        )

    #
    # Queries
    #
    def max_flow(self) -> int:
        """Return the maximum flow value, solving first if needed."""
        self.solve()
        return self.total_flow

    def residual_graph(self) -> List[List[EdgeState]]:
        """Return, per node, the final state of every outgoing arc.

        Residual arcs are included and flagged with ``is_residual``.
        """
        self.solve()
        return [
            [
                EdgeState(
                    edge_id=edge.edge_id,
                    src=edge.src,
                    dst=edge.dst,
                    flow=edge.flow,
                    capacity=edge.capacity,
                    is_residual=edge.is_residual(),
                )
                for edge in self.network.out_edges(node)
            ]
            for node in range(self.network.num_nodes)
        ]

    @property
    def phases(self) -> Tuple[PhaseStats, ...]:
        return tuple(self._phases)

    def progress_summary(self) -> str:
        """Return a human-readable per-phase report."""
        lines = ["Algorithm Progress Summary:"]
        for phase in self._phases:
            lines.append(
                f"Level {phase.index}: {phase.paths} paths, {phase.flow} flow"
            )
        return "\n".join(lines)

    def summary(self) -> FlowSummary:
        """Return flow values together with the source side of the minimum cut."""
        self.solve()
        network = self.network

        # The sink is unreachable now, so a full BFS labels exactly the source side
        levels = [UNREACHED] * network.num_nodes
        build_level_graph(network, levels, early_exit=False)
        reachable = frozenset(n for n, lvl in enumerate(levels) if lvl != UNREACHED)

        min_cut = tuple(
            (edge.edge_id, edge.src, edge.dst, edge.capacity)
            for edge in network.forward_edges()
            if edge.src in reachable and edge.dst not in reachable
        )
        return FlowSummary(
            total_flow=self.total_flow,
            source=network.source,
            sink=network.sink,
            phases=self.phases,
            edge_flow={edge.edge_id: edge.flow for edge in network.forward_edges()},
            reachable=reachable,
            min_cut=min_cut,
        )
