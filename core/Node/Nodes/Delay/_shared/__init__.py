"""
Delay Shared Utilities

Common constants and port helpers for delay nodes.
"""

from .constants import MILLISECONDS_PER_SECOND, INPUT_PORT_PREFIX, OUTPUT_PORT_PREFIX
from .ports import parse_input_index, max_connected_input, count_input_keys

__all__ = [
    'MILLISECONDS_PER_SECOND', 'INPUT_PORT_PREFIX', 'OUTPUT_PORT_PREFIX',
    'parse_input_index', 'max_connected_input', 'count_input_keys',
]
