"""Post-solve checks of a flow assignment.

Verifies the capacity constraint on every user edge and flow conservation at
every node other than the source and sink.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from dinicflow.graph.network import FlowNetwork
from dinicflow.logging import get_logger

logger = get_logger(__name__)


@dataclass
class FlowVerification:
    """Outcome of ``verify_flow``.

    Attributes:
        capacity_ok: Every user edge has ``0 <= flow <= capacity``.
        conservation_ok: Inflow equals outflow at every intermediate node.
        source_outflow: Net flow leaving the source.
        sink_inflow: Net flow entering the sink.
        flow_edges: Number of user edges carrying positive flow.
        violations: Human-readable description of each violation found.
    """

    capacity_ok: bool
    conservation_ok: bool
    source_outflow: int
    sink_inflow: int
    flow_edges: int
    violations: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return (
            self.capacity_ok
            and self.conservation_ok
            and self.source_outflow == self.sink_inflow
        )

    def report(self) -> str:
        def yes_no(flag: bool) -> str:
            return "Yes" if flag else "No"

        lines = ["Flow verification:"]
        lines.extend(self.violations)
        lines.append(
            f"- All edges respect capacity constraints: {yes_no(self.capacity_ok)}"
        )
        lines.append(
            "- Flow conservation at all non-source/sink nodes: "
            f"{yes_no(self.conservation_ok)}"
        )
        lines.append(f"- Total flow out of source: {self.source_outflow}")
        lines.append(f"- Total flow into sink: {self.sink_inflow}")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "capacity_ok": self.capacity_ok,
            "conservation_ok": self.conservation_ok,
            "source_outflow": self.source_outflow,
            "sink_inflow": self.sink_inflow,
            "flow_edges": self.flow_edges,
            "violations": list(self.violations),
        }


def verify_flow(network: FlowNetwork) -> FlowVerification:
    """Check capacity and conservation constraints of the current flow.

    Net flow is accumulated per user edge, so parallel edges count
    independently.

    Args:
        network: A network whose edges carry a flow assignment.

    Returns:
        FlowVerification: Flags, totals and any violations found.
    """
    capacity_violations: List[str] = []
    conservation_violations: List[str] = []
    net_flow = [0] * network.num_nodes
    flow_edges = 0

    for edge in network.forward_edges():
        if edge.flow < 0 or edge.flow > edge.capacity:
            capacity_violations.append(
                f"Capacity violation: edge {edge.src}->{edge.dst} has flow "
                f"{edge.flow}, capacity {edge.capacity}"
            )
        if edge.flow > 0:
            flow_edges += 1
        net_flow[edge.src] -= edge.flow
        net_flow[edge.dst] += edge.flow

    for node, balance in enumerate(net_flow):
        if node in (network.source, network.sink):
            continue
        if balance != 0:
            conservation_violations.append(
                f"Conservation violation: node {node} has net flow {balance}"
            )
    violations = capacity_violations + conservation_violations

    result = FlowVerification(
        capacity_ok=not capacity_violations,
        conservation_ok=not conservation_violations,
        source_outflow=-net_flow[network.source],
        sink_inflow=net_flow[network.sink],
        flow_edges=flow_edges,
        violations=violations,
    )
    for message in violations:
        logger.warning(message)
    return result