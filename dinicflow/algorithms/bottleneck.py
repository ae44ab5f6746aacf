"""Max-bottleneck augmenting paths inside a level graph.

A label-setting search in the style of Dijkstra where the path "distance" is
the smallest remaining capacity along it and larger is better. Nodes are
settled in decreasing order of their best bottleneck, so the first time the
sink is settled its label is the widest path available in the level graph.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Tuple

from dinicflow.graph.edge import FlowEdge
from dinicflow.graph.network import FlowNetwork


class SearchScratch:
    """Per-node arrays reused by every augmenting-path search.

    Attributes:
        best_flow: Widest bottleneck found so far to each node; 0 means not improved.
        via_edge: Arena id of the arc that produced ``best_flow``; -1 when unset.
        settled: Whether the node's label is final.
    """

    __slots__ = ("best_flow", "via_edge", "settled")

    def __init__(self, num_nodes: int) -> None:
        self.best_flow: List[int] = [0] * num_nodes
        self.via_edge: List[int] = [-1] * num_nodes
        self.settled: List[bool] = [False] * num_nodes

    def reset(self) -> None:
        n = len(self.best_flow)
        self.best_flow[:] = [0] * n
        self.via_edge[:] = [-1] * n
        self.settled[:] = [False] * n


def find_max_bottleneck_path(
    network: FlowNetwork,
    level: List[int],
    scratch: SearchScratch,
    infinity: int,
) -> Optional[Tuple[int, List[FlowEdge]]]:
    """Find the widest source-to-sink path that follows the level graph.

    Args:
        network: The flow network.
        level: Levels from ``build_level_graph`` for the current phase.
        scratch: Reusable search state; reset on entry.
        infinity: Label for the source, larger than any achievable flow.

    Returns:
        ``(bottleneck, path)`` with the arcs ordered from source to sink, or
        None if the sink cannot be reached.
    """
    scratch.reset()
    best_flow = scratch.best_flow
    via_edge = scratch.via_edge
    settled = scratch.settled
    edges = network.edges
    adjacency = network.adjacency
    source, sink = network.source, network.sink

    best_flow[source] = infinity
    # Max-heap via negated keys; the counter keeps equal keys in discovery order
    tiebreak = count()
    max_pq: List[Tuple[int, int, int]] = [(-infinity, next(tiebreak), source)]

    while max_pq and not settled[sink]:
        _, _, node = heappop(max_pq)
        if settled[node]:
            continue
        settled[node] = True
        if node == sink:
            break

        node_flow = best_flow[node]
        next_level = level[node] + 1
        for edge_id in adjacency[node]:
            edge = edges[edge_id]
            remaining = edge.capacity - edge.flow
            if remaining <= 0 or level[edge.dst] != next_level:
                continue
            candidate = node_flow if node_flow < remaining else remaining
            if candidate > best_flow[edge.dst]:
                best_flow[edge.dst] = candidate
                via_edge[edge.dst] = edge_id
                heappush(max_pq, (-candidate, next(tiebreak), edge.dst))

    bottleneck = best_flow[sink]
    if bottleneck == 0:
        return None

    path: List[FlowEdge] = []
    node = sink
    while node != source:
        edge = edges[via_edge[node]]
        path.append(edge)
        node = edge.src
    path.reverse()
    return bottleneck, path


def augment_max_bottleneck_path(
    network: FlowNetwork,
    level: List[int],
    scratch: SearchScratch,
    infinity: int,
) -> int:
    """Saturate the widest level-graph path and return the flow pushed.

    Returns:
        int: The bottleneck added, or 0 once the level graph is exhausted.
    """
    found = find_max_bottleneck_path(network, level, scratch, infinity)
    if found is None:
        return 0
    bottleneck, path = found
    for edge in path:
        edge.augment(bottleneck)
    return bottleneck
