from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .Data import NodeConnection, NodeUIData, PortDefinition


class BaseNodeProperty(ABC):
    """
    Abstract base class for node metadata properties.

    This class defines the interface for node identification, display
    and port shape. Subclasses must implement identifier.
    Other properties have default implementations.
    """

    @classmethod
    @abstractmethod
    def identifier(cls) -> str:
        """
        Return the node type tag.
        This identifier is used to map node types from graph documents to node classes.
        """
        pass

    @property
    def label(self) -> str:
        """
        Get the display label for this node.
        Default implementation returns the class name.

        Returns:
            str: A human-readable label for the node.
        """
        return self.__class__.__name__

    @property
    def description(self) -> str:
        """
        Get the description for this node.
        Default implementation returns empty string.

        Returns:
            str: A description explaining what this node does.
        """
        return ""

    @classmethod
    def get_ui_data(cls) -> NodeUIData:
        """
        Palette, context menu and info box metadata for this node type.
        """
        return NodeUIData(contextMenuTitle=cls.__name__)

    def get_body(self) -> Optional[str]:
        """
        Short text rendered inside the node on the canvas, or None.
        """
        return None

    def get_input_definitions(self, connections: Iterable[NodeConnection]) -> List[PortDefinition]:
        """
        Define input ports for this node given the graph's connections.
        Default is one 'default' input port.
        """
        return [PortDefinition(id="default", title="In")]

    def get_output_definitions(self, connections: Iterable[NodeConnection]) -> List[PortDefinition]:
        """
        Define output ports for this node given the graph's connections.
        Default is one 'default' output port.
        """
        return [PortDefinition(id="default", title="Out")]
