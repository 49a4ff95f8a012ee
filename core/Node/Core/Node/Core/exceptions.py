"""
Exceptions raised by nodes while being configured or executed.
"""


class NodeError(Exception):
    """Base exception for node errors."""
    pass


class NodeConfigurationError(NodeError, ValueError):
    """Raised when a node's form data does not pass validation."""

    def __init__(self, node_id: str, errors):
        self.node_id = node_id
        self.errors = errors
        super().__init__(f"Node {node_id} is not ready: {errors}")


class NodeExecutionError(NodeError):
    """Raised when a node fails while processing its inputs."""
    pass


class MissingInputError(NodeExecutionError, KeyError):
    """Raised when an input port implied by the payload is absent from it."""

    def __init__(self, node_id: str, port_id: str):
        self.node_id = node_id
        self.port_id = port_id
        super().__init__(f"Node {node_id} expected a value on '{port_id}'")

    def __str__(self):
        return self.args[0]
