"""Directed flow arc paired with its residual counterpart.

A user edge ``u -> v`` with capacity ``c`` is always created together with a
residual edge ``v -> u`` of capacity 0. The pair shares one unit of flow state
in the sense that ``edge.flow == -edge.residual.flow`` holds at all times.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Dict, Optional

from dinicflow.exceptions import FlowInvariantError, InvalidCapacity


def _label(node: int, source: Optional[int], sink: Optional[int]) -> str:
    if node == source:
        return "s"
    if node == sink:
        return "t"
    return str(node)


class FlowEdge:
    """One directed arc of a flow network.

    Attributes:
        src: Tail node index.
        dst: Head node index.
        capacity: Maximum flow allowed through the arc; 0 for residual arcs.
        flow: Current flow. Negative only on residual arcs.
        residual: The paired reverse arc. Set by ``pair()``.
        edge_id: Position of this arc in the owning network's edge arena.
    """

    __slots__ = ("src", "dst", "capacity", "flow", "residual", "edge_id")

    def __init__(self, src: int, dst: int, capacity: int, edge_id: int = -1) -> None:
        """Create a forward arc.

        Raises:
            InvalidCapacity: If ``capacity`` is not a positive integer.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, Integral):
            raise InvalidCapacity(
                f"Edge {src}->{dst}: capacity must be an integer, got {capacity!r}"
            )
        if capacity <= 0:
            raise InvalidCapacity(
                f"Edge {src}->{dst}: capacity must be positive, got {capacity}"
            )
        self.src = src
        self.dst = dst
        self.capacity = int(capacity)
        self.flow = 0
        self.residual: Optional[FlowEdge] = None
        self.edge_id = edge_id

    @classmethod
    def residual_of(cls, forward: FlowEdge, edge_id: int = -1) -> FlowEdge:
        """Build the zero-capacity reverse arc for ``forward`` and pair them."""
        edge = cls.__new__(cls)
        edge.src = forward.dst
        edge.dst = forward.src
        edge.capacity = 0
        edge.flow = 0
        edge.residual = None
        edge.edge_id = edge_id
        forward.pair(edge)
        return edge

    def pair(self, other: FlowEdge) -> None:
        self.residual = other
        other.residual = self

    def remaining_capacity(self) -> int:
        return self.capacity - self.flow

    def is_residual(self) -> bool:
        return self.capacity == 0

    def augment(self, amount: int) -> None:
        """Push ``amount`` units along this arc.

        Raises:
            FlowInvariantError: If ``amount`` is not in ``(0, remaining_capacity()]``
                or the arc is unpaired.
        """
        if self.residual is None:
            raise FlowInvariantError(f"Edge {self.src}->{self.dst} has no residual pair")
        if amount <= 0 or amount > self.remaining_capacity():
            raise FlowInvariantError(
                f"Cannot augment edge {self.src}->{self.dst} by {amount}: "
                f"remaining capacity is {self.remaining_capacity()}"
            )
        self.flow += amount
        self.residual.flow -= amount

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.edge_id,
            "src": self.src,
            "dst": self.dst,
            "capacity": self.capacity,
            "flow": self.flow,
            "residual": self.is_residual(),
        }

    def describe(self, source: Optional[int] = None, sink: Optional[int] = None) -> str:
        """Return a one-line report, labelling source and sink as ``s`` and ``t``."""
        return (
            f"Edge {_label(self.src, source, sink)} -> {_label(self.dst, source, sink)}"
            f" | flow = {self.flow:3d} | capacity = {self.capacity:3d}"
            f" | is residual: {self.is_residual()}"
        )

    def __repr__(self) -> str:
        return (
            f"FlowEdge(src={self.src}, dst={self.dst}, "
            f"capacity={self.capacity}, flow={self.flow})"
        )
