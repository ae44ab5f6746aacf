"""Append-only flow network with integer node ids.

`FlowNetwork` keeps every arc in one arena list (``edges``) and lets each node
hold a list of arena indices for its outgoing arcs. User edge ``k`` lives at
index ``2k`` and its residual pair at ``2k + 1``.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Dict, Iterator, List

from dinicflow.exceptions import InvalidTopology, NetworkFrozenError
from dinicflow.graph.edge import FlowEdge
from dinicflow.logging import get_logger

logger = get_logger(__name__)


class FlowNetwork:
    """Directed capacitated network with a designated source and sink.

    Enforces:
      - Node indices are integers in ``[0, num_nodes)``.
      - ``source != sink``.
      - Capacities of user edges are positive integers.
      - No edges are added once ``freeze()`` has been called.

    Parallel edges are independent arcs; nothing is merged.
    """

    def __init__(self, num_nodes: int, source: int, sink: int) -> None:
        """Create an empty network.

        Args:
            num_nodes: Number of nodes ``N``; nodes are ``0..N-1``.
            source: Source node index.
            sink: Sink node index.

        Raises:
            InvalidTopology: If the node count is below 2, an endpoint is out of
                range, or ``source == sink``.
        """
        if isinstance(num_nodes, bool) or not isinstance(num_nodes, Integral):
            raise InvalidTopology(f"Node count must be an integer, got {num_nodes!r}")
        if num_nodes < 2:
            raise InvalidTopology(f"Network needs at least 2 nodes, got {num_nodes}")
        self.num_nodes = int(num_nodes)
        self._check_node(source, "source")
        self._check_node(sink, "sink")
        if source == sink:
            raise InvalidTopology(f"Source and sink must differ (both are {source})")

        self.source = int(source)
        self.sink = int(sink)
        self.edges: List[FlowEdge] = []
        self.adjacency: List[List[int]] = [[] for _ in range(self.num_nodes)]
        self.total_capacity = 0
        self._frozen = False

    def _check_node(self, node: Any, role: str) -> None:
        if isinstance(node, bool) or not isinstance(node, Integral):
            raise InvalidTopology(f"{role} must be a node index, got {node!r}")
        if not 0 <= node < self.num_nodes:
            raise InvalidTopology(
                f"{role} {node} is out of range [0, {self.num_nodes})"
            )

    #
    # Construction
    #
    def add_edge(self, src: int, dst: int, capacity: int) -> int:
        """Add a forward arc ``src -> dst`` and its residual pair.

        Args:
            src: Tail node.
            dst: Head node.
            capacity: Positive integer capacity.

        Returns:
            int: Arena index of the forward arc.

        Raises:
            InvalidTopology: If ``src`` or ``dst`` is out of range.
            InvalidCapacity: If ``capacity`` is not a positive integer.
            NetworkFrozenError: If solving has already started.
        """
        if self._frozen:
            raise NetworkFrozenError("Cannot add edges after solving has started")
        self._check_node(src, "from")
        self._check_node(dst, "to")

        # Build both arcs before touching the arena so a failure leaves it intact
        forward_id = len(self.edges)
        forward = FlowEdge(int(src), int(dst), capacity, edge_id=forward_id)
        backward = FlowEdge.residual_of(forward, edge_id=forward_id + 1)

        self.edges.append(forward)
        self.edges.append(backward)
        self.adjacency[forward.src].append(forward_id)
        self.adjacency[backward.src].append(forward_id + 1)
        self.total_capacity += forward.capacity
        return forward_id

    def freeze(self) -> None:
        """Disallow further edge insertion."""
        if not self._frozen:
            logger.debug(
                "Freezing network: %d nodes, %d edges", self.num_nodes, self.num_edges
            )
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    #
    # Queries
    #
    @property
    def num_edges(self) -> int:
        """Number of user-inserted (forward) edges."""
        return len(self.edges) // 2

    def edge(self, edge_id: int) -> FlowEdge:
        return self.edges[edge_id]

    def out_edges(self, node: int) -> Iterator[FlowEdge]:
        """Iterate arcs leaving ``node`` in insertion order, residual arcs included."""
        edges = self.edges
        for edge_id in self.adjacency[node]:
            yield edges[edge_id]

    def forward_edges(self) -> Iterator[FlowEdge]:
        """Iterate user edges in insertion order."""
        return iter(self.edges[0::2])

    def to_dict(self) -> Dict[str, Any]:
        """Return a node-link style dict of the network and its current flow."""
        return {
            "graph": {
                "num_nodes": self.num_nodes,
                "source": self.source,
                "sink": self.sink,
            },
            "nodes": [{"id": node} for node in range(self.num_nodes)],
            "links": [
                {
                    "source": edge.src,
                    "target": edge.dst,
                    "key": edge.edge_id,
                    "attr": {"capacity": edge.capacity, "flow": edge.flow},
                }
                for edge in self.forward_edges()
            ],
        }

    def __repr__(self) -> str:
        return (
            f"FlowNetwork(num_nodes={self.num_nodes}, source={self.source}, "
            f"sink={self.sink}, num_edges={self.num_edges})"
        )
