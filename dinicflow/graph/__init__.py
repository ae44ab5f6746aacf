"""Flow network data structures."""

from dinicflow.graph.edge import FlowEdge
from dinicflow.graph.network import FlowNetwork

__all__ = ["FlowEdge", "FlowNetwork"]
