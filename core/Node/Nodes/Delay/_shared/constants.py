"""
Delay Constants

Shared constants for delay nodes.
"""

import re

MILLISECONDS_PER_SECOND = 1000

INPUT_PORT_PREFIX = "input"
OUTPUT_PORT_PREFIX = "output"

# Matches "input1", "input12"... but not "input", "input0" or "input01"
INPUT_PORT_PATTERN = re.compile(rf"^{INPUT_PORT_PREFIX}([1-9][0-9]*)$")
