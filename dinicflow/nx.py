"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and `FlowNetwork`, whose nodes are contiguous
integer indices.

Example:
    >>> import networkx as nx
    >>> from dinicflow.nx import from_networkx, to_networkx
    >>> from dinicflow.solver import DinicSolver
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=100)
    >>> G.add_edge("B", "C", capacity=50)
    >>>
    >>> network, node_map, edge_map = from_networkx(G, "A", "C")
    >>> DinicSolver(network).max_flow()
    50
    >>> G_out = to_networkx(network, node_map)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from dinicflow.exceptions import InvalidCapacity, InvalidTopology
from dinicflow.graph.network import FlowNetwork

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


# Type alias for edge references: (source_node, target_node, edge_key)
EdgeRef = Tuple[Hashable, Hashable, Any]


@dataclass
class EdgeMap:
    """Mapping between forward edge ids of a `FlowNetwork` and NetworkX edges.

    Attributes:
        to_ref: Maps forward edge arena id to the original ``(u, v, key)``.
        from_ref: Maps ``(u, v, key)`` to the list of forward edge ids created
            for it (two when ``bidirectional=True``).
    """

    to_ref: Dict[int, EdgeRef] = field(default_factory=dict)
    from_ref: Dict[EdgeRef, List[int]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.to_ref)


def _as_capacity(value: Any, ref: EdgeRef) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCapacity(f"Edge {ref}: capacity must be numeric, got {value!r}")
    if not isinstance(value, Integral) and not math.isfinite(value):
        raise InvalidCapacity(f"Edge {ref}: capacity must be finite, got {value!r}")
    if not isinstance(value, Integral) and value != int(value):
        raise InvalidCapacity(f"Edge {ref}: capacity must be integral, got {value!r}")
    return int(value)


def from_networkx(
    G: NxGraph,
    source: Hashable,
    sink: Hashable,
    *,
    capacity_attr: str = "capacity",
    default_capacity: int = 1,
    bidirectional: bool = False,
) -> Tuple[FlowNetwork, NodeMap, EdgeMap]:
    """Convert a NetworkX graph to a `FlowNetwork`.

    Nodes are indexed in sorted order (by ``str``) for deterministic results.
    Edges are inserted in NetworkX iteration order.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        source: Name of the source node.
        sink: Name of the sink node.
        capacity_attr: Edge attribute holding capacity.
        default_capacity: Capacity used when the attribute is missing.
        bidirectional: Also insert the reverse arc for every edge. Use this for
            undirected graphs, whose edges are otherwise taken in one direction.

    Returns:
        Tuple of (network, node_map, edge_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        InvalidTopology: If source or sink is not a node of G, or they are equal.
        InvalidCapacity: If a capacity is not a positive integral number.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    for role, name in (("source", source), ("sink", sink)):
        if name not in G:
            raise InvalidTopology(f"{role} {name!r} is not a node of the graph")

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)
    network = FlowNetwork(
        len(node_names), node_map.to_index[source], node_map.to_index[sink]
    )

    edge_map = EdgeMap()
    if isinstance(G, (nx.MultiDiGraph, nx.MultiGraph)):
        edges_iter = G.edges(keys=True, data=True)
    else:
        edges_iter = ((u, v, 0, d) for u, v, d in G.edges(data=True))

    for u, v, key, data in edges_iter:
        ref: EdgeRef = (u, v, key)
        capacity = _as_capacity(data.get(capacity_attr, default_capacity), ref)
        src_idx = node_map.to_index[u]
        dst_idx = node_map.to_index[v]

        arcs = [(src_idx, dst_idx)]
        if bidirectional:
            arcs.append((dst_idx, src_idx))
        for a, b in arcs:
            edge_id = network.add_edge(a, b, capacity)
            edge_map.to_ref[edge_id] = ref
            edge_map.from_ref.setdefault(ref, []).append(edge_id)

    return network, node_map, edge_map


def to_networkx(
    network: FlowNetwork,
    node_map: Optional[NodeMap] = None,
    *,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> "nx.MultiDiGraph":
    """Convert a `FlowNetwork` to a NetworkX MultiDiGraph.

    Only user edges are emitted; the edge key is the forward edge arena id.
    Current flow values are copied to ``flow_attr``.

    Args:
        network: The network to convert.
        node_map: Optional NodeMap to restore original node names. If None,
            nodes are labeled 0, 1, 2, ...
        capacity_attr: Edge attribute name for capacity.
        flow_attr: Edge attribute name for flow.

    Returns:
        nx.MultiDiGraph with graph attributes ``source`` and ``sink``.
    """
    import networkx as nx

    def name(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G = nx.MultiDiGraph(source=name(network.source), sink=name(network.sink))
    G.add_nodes_from(name(idx) for idx in range(network.num_nodes))
    for edge in network.forward_edges():
        G.add_edge(
            name(edge.src),
            name(edge.dst),
            key=edge.edge_id,
            **{capacity_attr: edge.capacity, flow_attr: edge.flow},
        )
    return G
