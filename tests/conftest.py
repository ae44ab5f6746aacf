"""Shared fixtures: small flow networks with known maximum flows.

Edge ids in comments are arena ids; user edge ``k`` has id ``2k``.
"""

from __future__ import annotations

import logging
import random

import pytest

from dinicflow.graph.network import FlowNetwork
from dinicflow.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    # CLI tests switch the package level globally
    yield
    set_global_log_level(logging.INFO)


@pytest.fixture
def single_edge():
    #  0 ──[5]──► 1
    net = FlowNetwork(2, source=0, sink=1)
    net.add_edge(0, 1, 5)
    return net


@pytest.fixture
def diamond():
    #        [10]      [5]
    #   ┌───────►1────────┐
    #   │                 ▼
    #   0                 3
    #   │                 ▲
    #   └───────►2────────┘
    #        [5]       [10]
    net = FlowNetwork(4, source=0, sink=3)
    net.add_edge(0, 1, 10)  # id 0
    net.add_edge(0, 2, 5)  # id 2
    net.add_edge(1, 3, 5)  # id 4
    net.add_edge(2, 3, 10)  # id 6
    return net


@pytest.fixture
def disconnected():
    #  0 ──[4]──► 1      2 (sink, unreachable)
    net = FlowNetwork(3, source=0, sink=2)
    net.add_edge(0, 1, 4)
    return net


@pytest.fixture
def parallel():
    #     [3]
    #   ┌────┐
    #   0    1 ──[5]──► 2
    #   └────┘
    #     [3]
    net = FlowNetwork(3, source=0, sink=2)
    net.add_edge(0, 1, 3)  # id 0
    net.add_edge(0, 1, 3)  # id 2
    net.add_edge(1, 2, 5)  # id 4
    return net


@pytest.fixture
def two_phase():
    # Direct arc 0->3 is used in phase 1; the long path 0->1->2->3 only
    # enters the level graph in phase 2.
    #
    #   0 ──[1]──► 1 ──[1]──► 2 ──[1]──► 3
    #   └────────────────[1]─────────────┘
    net = FlowNetwork(4, source=0, sink=3)
    net.add_edge(0, 1, 1)  # id 0
    net.add_edge(1, 2, 1)  # id 2
    net.add_edge(2, 3, 1)  # id 4
    net.add_edge(0, 3, 1)  # id 6
    return net


@pytest.fixture
def wide_and_narrow():
    # Two level-2 paths; the widest one goes through node 2.
    #
    #        [2]       [2]
    #   ┌───────►1────────┐
    #   │                 ▼
    #   0                 3
    #   │                 ▲
    #   └───────►2────────┘
    #        [7]       [6]
    net = FlowNetwork(4, source=0, sink=3)
    net.add_edge(0, 1, 2)  # id 0
    net.add_edge(1, 3, 2)  # id 2
    net.add_edge(0, 2, 7)  # id 4
    net.add_edge(2, 3, 6)  # id 6
    return net


@pytest.fixture
def needs_reverse_arc():
    # Phase 1 takes the shortest path 0->1->2->7. Reaching max flow 2 needs
    # phase 2 to cancel 1->2 through its residual arc:
    # 0->5->6->2 ~> 1->3->4->7. All capacities are 1.
    #
    #   0 ──► 1 ──► 2 ──► 7
    #   │     │     ▲     ▲
    #   │     └► 3 ─┼► 4 ─┘
    #   │           │
    #   └► 5 ──► 6 ─┘
    net = FlowNetwork(8, source=0, sink=7)
    net.add_edge(0, 1, 1)  # id 0
    net.add_edge(1, 2, 1)  # id 2
    net.add_edge(2, 7, 1)  # id 4
    net.add_edge(1, 3, 1)  # id 6
    net.add_edge(3, 4, 1)  # id 8
    net.add_edge(4, 7, 1)  # id 10
    net.add_edge(0, 5, 1)  # id 12
    net.add_edge(5, 6, 1)  # id 14
    net.add_edge(6, 2, 1)  # id 16
    return net


def build_random_edges(seed: int, num_nodes: int, num_edges: int, max_cap: int = 20):
    """Return a reproducible list of ``(u, v, capacity)`` without self-loops."""
    rng = random.Random(seed)
    edges = []
    while len(edges) < num_edges:
        u = rng.randrange(num_nodes)
        v = rng.randrange(num_nodes)
        if u == v:
            continue
        edges.append((u, v, rng.randint(1, max_cap)))
    return edges


@pytest.fixture
def random_edges():
    return build_random_edges
