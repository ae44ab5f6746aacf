"""Result containers for a max-flow run.

Defines small, serializable dataclasses describing per-phase progress, final
per-edge state and the minimum cut. Objects expose ``to_dict()`` returning
JSON-safe primitives.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple

from dinicflow.logging import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class PhaseStats:
    """Outcome of one level-graph phase.

    Args:
        index: 1-based phase number.
        paths: Augmenting paths found in the phase.
        flow: Flow added by the phase.
        elapsed: Wall-clock seconds spent in the phase.
    """

    index: int
    paths: int
    flow: int
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        if self.index < 1:
            logger.error("PhaseStats.index must be >= 1: %r", self.index)
            raise ValueError("PhaseStats.index must be >= 1")
        if self.paths < 0 or self.flow < 0:
            logger.error(
                "PhaseStats counters must be non-negative: paths=%r flow=%r",
                self.paths,
                self.flow,
            )
            raise ValueError("PhaseStats counters must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class EdgeState:
    """Final state of one arc of the residual graph."""

    edge_id: int
    src: int
    dst: int
    flow: int
    capacity: int
    is_residual: bool

    @property
    def remaining_capacity(self) -> int:
        return self.capacity - self.flow

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a solved network.

    Attributes:
        total_flow: Maximum flow value.
        source: Source node.
        sink: Sink node.
        phases: Per-phase statistics in execution order.
        edge_flow: Flow per user edge, keyed by arena id.
        reachable: Nodes reachable from the source in the final residual graph.
        min_cut: ``(edge_id, src, dst, capacity)`` of user edges crossing the cut.
    """

    total_flow: int
    source: int
    sink: int
    phases: Tuple[PhaseStats, ...] = ()
    edge_flow: Dict[int, int] = field(default_factory=dict)
    reachable: frozenset = frozenset()
    min_cut: Tuple[Tuple[int, int, int, int], ...] = ()

    @property
    def min_cut_capacity(self) -> int:
        return sum(capacity for _, _, _, capacity in self.min_cut)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe dict. Integer edge ids become string keys."""
        return {
            "total_flow": self.total_flow,
            "source": self.source,
            "sink": self.sink,
            "phases": [p.to_dict() for p in self.phases],
            "edge_flow": {str(k): v for k, v in self.edge_flow.items()},
            "reachable": sorted(self.reachable),
            "min_cut": [list(e) for e in self.min_cut],
        }
