from dinicflow.algorithms.levels import UNREACHED, build_level_graph
from dinicflow.graph.network import FlowNetwork


def fresh_levels(net):
    return [UNREACHED] * net.num_nodes


def test_diamond_levels(diamond):
    level = fresh_levels(diamond)
    assert build_level_graph(diamond, level) is True
    assert level == [0, 1, 1, 2]


def test_unreached_sink(disconnected):
    level = fresh_levels(disconnected)
    assert build_level_graph(disconnected, level) is False
    assert level == [0, 1, UNREACHED]


def test_saturated_edges_are_skipped(diamond):
    for edge in diamond.out_edges(0):
        edge.augment(edge.capacity)
    level = fresh_levels(diamond)
    assert build_level_graph(diamond, level) is False
    assert level == [0, UNREACHED, UNREACHED, UNREACHED]


def test_residual_arcs_are_traversed():
    net = FlowNetwork(3, source=0, sink=2)
    net.add_edge(0, 1, 2)
    net.add_edge(2, 1, 2)
    # Pushing 2->1 opens the residual arc 1->2
    net.edge(2).augment(2)
    level = fresh_levels(net)
    assert build_level_graph(net, level) is True
    assert level == [0, 1, 2]


def test_levels_are_overwritten(diamond):
    level = [7, 7, 7, 7]
    build_level_graph(diamond, level)
    assert level == [0, 1, 1, 2]


class TestEarlyExit:
    def build_chain(self):
        # Sink is node 1; nodes 2 and 3 lie beyond it
        net = FlowNetwork(4, source=0, sink=1)
        net.add_edge(0, 1, 1)
        net.add_edge(1, 2, 1)
        net.add_edge(2, 3, 1)
        return net

    def test_early_exit_prunes_beyond_sink(self):
        net = self.build_chain()
        level = fresh_levels(net)
        assert build_level_graph(net, level, early_exit=True)
        assert level == [0, 1, 2, UNREACHED]

    def test_full_traversal(self):
        net = self.build_chain()
        level = fresh_levels(net)
        assert build_level_graph(net, level, early_exit=False)
        assert level == [0, 1, 2, 3]

    def test_levels_up_to_sink_match(self, two_phase, needs_reverse_arc):
        for net in (two_phase, needs_reverse_arc):
            pruned = fresh_levels(net)
            full = fresh_levels(net)
            build_level_graph(net, pruned, early_exit=True)
            build_level_graph(net, full, early_exit=False)
            sink_level = full[net.sink]
            assert pruned[net.sink] == sink_level
            for node in range(net.num_nodes):
                if full[node] != UNREACHED and full[node] <= sink_level:
                    assert pruned[node] == full[node]

    def test_sink_level_sibling_still_labelled(self, two_phase):
        # Node 2 is discovered before the sink is dequeued
        level = fresh_levels(two_phase)
        build_level_graph(two_phase, level, early_exit=True)
        assert level == [0, 1, 2, 1]
