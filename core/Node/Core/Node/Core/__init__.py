from .BaseNode import BaseNode, BlockingNode


# Utilities
from .Data import (
    DataType,
    EditorDefinition,
    Inputs,
    NodeConfig,
    NodeConfigData,
    NodeConnection,
    NodeUIData,
    Outputs,
    PortDefinition,
    VisualData,
)
from .exceptions import NodeError, NodeConfigurationError, NodeExecutionError, MissingInputError


__all__ = [
    'BaseNode', 'BlockingNode',
    'DataType', 'EditorDefinition', 'Inputs', 'NodeConfig', 'NodeConfigData', 'NodeConnection',
    'NodeUIData', 'Outputs', 'PortDefinition', 'VisualData',
    'NodeError', 'NodeConfigurationError', 'NodeExecutionError', 'MissingInputError',
]
