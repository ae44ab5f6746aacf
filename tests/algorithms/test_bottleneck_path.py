from dinicflow.algorithms.bottleneck import (
    SearchScratch,
    augment_max_bottleneck_path,
    find_max_bottleneck_path,
)
from dinicflow.algorithms.levels import UNREACHED, build_level_graph
from dinicflow.graph.network import FlowNetwork


def prepare(net):
    level = [UNREACHED] * net.num_nodes
    build_level_graph(net, level)
    return level, SearchScratch(net.num_nodes), net.total_capacity + 1


def test_scratch_reset():
    scratch = SearchScratch(3)
    scratch.best_flow[1] = 9
    scratch.via_edge[1] = 4
    scratch.settled[1] = True
    best_flow = scratch.best_flow
    scratch.reset()
    assert scratch.best_flow == [0, 0, 0]
    assert scratch.via_edge == [-1, -1, -1]
    assert scratch.settled == [False, False, False]
    # Arrays are cleared in place, not reallocated
    assert scratch.best_flow is best_flow


def test_widest_path_is_chosen(wide_and_narrow):
    level, scratch, inf = prepare(wide_and_narrow)
    bottleneck, path = find_max_bottleneck_path(wide_and_narrow, level, scratch, inf)
    assert bottleneck == 6
    assert [e.edge_id for e in path] == [4, 6]
    # Finding does not mutate flows
    assert all(e.flow == 0 for e in wide_and_narrow.edges)


def test_augment_sequence(wide_and_narrow):
    level, scratch, inf = prepare(wide_and_narrow)
    assert augment_max_bottleneck_path(wide_and_narrow, level, scratch, inf) == 6
    assert wide_and_narrow.edge(4).flow == 6
    assert wide_and_narrow.edge(6).flow == 6
    assert augment_max_bottleneck_path(wide_and_narrow, level, scratch, inf) == 2
    assert augment_max_bottleneck_path(wide_and_narrow, level, scratch, inf) == 0
    assert [e.flow for e in wide_and_narrow.forward_edges()] == [2, 2, 6, 6]


def test_tie_break_prefers_first_discovered():
    net = FlowNetwork(4, source=0, sink=3)
    net.add_edge(0, 1, 4)  # id 0
    net.add_edge(1, 3, 4)  # id 2
    net.add_edge(0, 2, 4)  # id 4
    net.add_edge(2, 3, 4)  # id 6
    level, scratch, inf = prepare(net)
    bottleneck, path = find_max_bottleneck_path(net, level, scratch, inf)
    assert bottleneck == 4
    assert [e.edge_id for e in path] == [0, 2]


def test_parallel_edge_tie_uses_first_arc(parallel):
    level, scratch, inf = prepare(parallel)
    bottleneck, path = find_max_bottleneck_path(parallel, level, scratch, inf)
    assert bottleneck == 3
    assert [e.edge_id for e in path] == [0, 4]


def test_level_restriction(two_phase):
    # The long path 0->1->2->3 is outside the first level graph
    level, scratch, inf = prepare(two_phase)
    assert augment_max_bottleneck_path(two_phase, level, scratch, inf) == 1
    assert two_phase.edge(6).flow == 1
    assert augment_max_bottleneck_path(two_phase, level, scratch, inf) == 0
    assert two_phase.edge(0).flow == 0


def test_no_path_returns_none(disconnected):
    level = [0, 1, UNREACHED]
    scratch = SearchScratch(3)
    assert find_max_bottleneck_path(disconnected, level, scratch, 5) is None
    assert augment_max_bottleneck_path(disconnected, level, scratch, 5) == 0
