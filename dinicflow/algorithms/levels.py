"""Level-graph construction for Dinic's algorithm.

Assigns every node its breadth-first distance from the source in the residual
graph. Only arcs that go from level ``L`` to level ``L + 1`` are later used by
the augmenting-path search.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List

from dinicflow.graph.network import FlowNetwork

UNREACHED = -1


def build_level_graph(
    network: FlowNetwork,
    level: List[int],
    early_exit: bool = True,
) -> bool:
    """Fill ``level`` in place with BFS distances from the source.

    Traverses arcs with positive remaining capacity. The traversal does not stop
    when the sink is discovered: every node at or below the sink's level gets
    its level. With ``early_exit`` set, nodes strictly deeper than the sink are
    not expanded once the sink has been dequeued.

    Args:
        network: The flow network.
        level: Reusable array of length ``network.num_nodes``; overwritten.
        early_exit: Prune expansion beyond the sink's level.

    Returns:
        bool: True if the sink was reached.
    """
    for i in range(len(level)):
        level[i] = UNREACHED

    source, sink = network.source, network.sink
    edges = network.edges
    adjacency = network.adjacency

    level[source] = 0
    queue: Deque[int] = deque([source])
    sink_reached = False

    while queue:
        node = queue.popleft()
        if sink_reached and level[node] > level[sink]:
            continue
        if early_exit and node == sink:
            sink_reached = True

        next_level = level[node] + 1
        for edge_id in adjacency[node]:
            edge = edges[edge_id]
            if edge.capacity - edge.flow > 0 and level[edge.dst] == UNREACHED:
                level[edge.dst] = next_level
                queue.append(edge.dst)

    return level[sink] != UNREACHED
