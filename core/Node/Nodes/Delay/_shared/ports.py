"""
Port helpers for nodes whose arity follows the connections wired into them.
"""

from typing import Iterable, Optional

from ....Core.Node.Core import NodeConnection
from .constants import INPUT_PORT_PATTERN


def parse_input_index(port_id: str) -> Optional[int]:
    """Return N for an 'input<N>' port id, None for anything else."""
    if not isinstance(port_id, str):
        return None
    match = INPUT_PORT_PATTERN.match(port_id)
    if match is None:
        return None
    return int(match.group(1))


def max_connected_input(node_id: str, connections: Iterable[NodeConnection]) -> int:
    """Highest input index wired into node_id, or 0 when nothing is."""
    indices = [
        parse_input_index(connection.target_port_id)
        for connection in connections
        if connection.target_node_id == node_id
    ]
    return max((index for index in indices if index is not None), default=0)


def count_input_keys(payload: Iterable[str]) -> int:
    """Number of keys in a payload that name an input port."""
    return sum(1 for key in payload if parse_input_index(key) is not None)
