"""
Unit tests for the Delay node's connection-derived port shape.
"""

import pytest
from Node.Core.Node.Core.Data import DataType, NodeConnection
from Node.Nodes.Delay.PassThroughDelay.node import DelayNode
from Node.Nodes.Delay._shared import parse_input_index


def _make_node():
    return DelayNode(DelayNode.create())


def _connect(node, *port_ids, source="upstream"):
    return [
        NodeConnection(
            source_node_id=source,
            source_port_id="output",
            target_node_id=node.id,
            target_port_id=port_id,
        )
        for port_id in port_ids
    ]


def _ids(ports):
    return [port.id for port in ports]


def test_no_connections_offers_one_input_and_no_outputs():
    node = _make_node()
    assert _ids(node.get_input_definitions([])) == ["input1"]
    assert node.get_output_definitions([]) == []


def test_ports_follow_highest_connected_input():
    node = _make_node()
    connections = _connect(node, "input1", "input2")
    assert _ids(node.get_input_definitions(connections)) == ["input1", "input2", "input3"]
    assert _ids(node.get_output_definitions(connections)) == ["output1", "output2"]


def test_gap_in_connected_inputs_still_counts_up_to_the_max():
    node = _make_node()
    connections = _connect(node, "input1", "input3")
    assert _ids(node.get_input_definitions(connections)) == ["input1", "input2", "input3", "input4"]
    assert _ids(node.get_output_definitions(connections)) == ["output1", "output2", "output3"]


@pytest.mark.parametrize("max_index", [0, 1, 2, 7, 20])
def test_input_count_is_max_plus_one_and_output_count_is_max(max_index):
    node = _make_node()
    connections = _connect(node, f"input{max_index}") if max_index else []
    assert len(node.get_input_definitions(connections)) == max_index + 1
    assert len(node.get_output_definitions(connections)) == max_index


def test_connections_to_other_nodes_are_ignored():
    node = _make_node()
    other = NodeConnection(
        source_node_id="a", source_port_id="output1", target_node_id="someone-else", target_port_id="input9"
    )
    connections = _connect(node, "input2") + [other]
    assert len(node.get_input_definitions(connections)) == 3


def test_malformed_port_ids_are_ignored():
    node = _make_node()
    connections = _connect(node, "input", "inputX", "input0", "input-1", "Input4", "input2a", "value5")
    assert _ids(node.get_input_definitions(connections)) == ["input1"]
    assert node.get_output_definitions(connections) == []


def test_port_titles_and_types():
    node = _make_node()
    connections = _connect(node, "input1")
    inputs = node.get_input_definitions(connections)
    outputs = node.get_output_definitions(connections)
    assert [port.title for port in inputs] == ["Input 1", "Input 2"]
    assert [port.title for port in outputs] == ["Output 1"]
    assert all(port.dataType == DataType.ANY for port in inputs + outputs)


def test_port_derivation_is_idempotent():
    node = _make_node()
    connections = _connect(node, "input1", "input4")
    assert node.get_input_definitions(connections) == node.get_input_definitions(connections)
    assert node.get_output_definitions(connections) == node.get_output_definitions(connections)


def test_ports_track_live_connections():
    """Nothing is cached: dropping a connection shrinks the shape again."""
    node = _make_node()
    connections = _connect(node, "input1", "input2")
    assert len(node.get_input_definitions(connections)) == 3
    assert len(node.get_input_definitions(connections[:1])) == 2


def test_connections_may_be_any_iterable():
    node = _make_node()
    connections = iter(_connect(node, "input2"))
    assert len(node.get_output_definitions(connections)) == 2


@pytest.mark.parametrize(
    "port_id,expected",
    [("input1", 1), ("input12", 12), ("input", None), ("input0", None), ("input01", None), ("in1", None), (None, None)],
)
def test_parse_input_index(port_id, expected):
    assert parse_input_index(port_id) == expected
