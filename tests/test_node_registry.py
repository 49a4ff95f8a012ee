"""
Unit tests for NodeRegistry discovery and creation.
"""

import pytest
from Node.Core.Node.Core.Data import NodeConfig, NodeConfigData
from Node.Nodes.Delay.PassThroughDelay.node import DelayNode
from Workflow.node_registry import NodeRegistry


@pytest.fixture(autouse=True)
def fresh_registry():
    NodeRegistry.reset()
    yield
    NodeRegistry.reset()


def test_delay_node_is_discovered():
    assert "delay" in NodeRegistry.list_node_types()
    assert NodeRegistry.get_node_class("delay") is DelayNode


def test_create_node_from_config():
    config = NodeConfig(id="n1", type="delay", data=NodeConfigData(form={"delay": 30}))
    node = NodeRegistry.create_node(config)
    assert isinstance(node, DelayNode)
    assert node.id == "n1"
    assert node.delay_ms == 30


def test_create_default_uses_node_factory():
    node = NodeRegistry.create_default("delay")
    assert isinstance(node, DelayNode)
    assert node.node_config.title == "Delay"
    assert node.delay_ms == 0


def test_unknown_type_raises_with_available_types():
    with pytest.raises(ValueError) as exc:
        NodeRegistry.create_node(NodeConfig(id="n2", type="teleport"))
    assert "teleport" in str(exc.value)
    assert "delay" in str(exc.value)


def test_get_node_class_unknown_type():
    with pytest.raises(ValueError):
        NodeRegistry.get_node_class("teleport")


def test_ui_data_lists_delay_palette_entry():
    entries = {entry["type"]: entry for entry in NodeRegistry.get_ui_data()}
    delay = entries["delay"]
    assert delay["title"] == "Delay"
    assert delay["contextMenuTitle"] == "Delay"
    assert delay["group"] == ["Logic"]
