from typing import Any, Dict, List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field
from enum import Enum


Inputs = Dict[str, Any]
Outputs = Dict[str, Any]


class DataType(str, Enum):
    ANY = "any"


class VisualData(BaseModel):
    """
    Placement of the node on the graph canvas.
    """

    x: float = Field(default=0, description="Horizontal canvas position")
    y: float = Field(default=0, description="Vertical canvas position")
    width: Optional[float] = Field(default=None, description="Rendered width of the node")


class NodeConfigData(BaseModel):
    """
    Data for the node config.
    """
    form: Dict[str, Any] = Field(
        default_factory=dict, description="Form data for the node"
    )


class NodeConfig(BaseModel):
    """
    Serialized state of a node placed in a graph.
    """

    id: str = Field(
        default_factory=lambda: uuid4().hex,
        description="Unique identifier for the node",
    )
    type: str = Field(..., description="Type tag used to resolve the node class")
    title: Optional[str] = Field(default=None, description="Display title")
    visualData: VisualData = Field(
        default_factory=VisualData, description="Canvas placement"
    )
    data: NodeConfigData = Field(
        default_factory=NodeConfigData, description="Data for the node"
    )


class NodeConnection(BaseModel):
    """
    Directed edge from an output port of one node to an input port of another.
    """

    source_node_id: str = Field(..., description="Node the value flows out of")
    source_port_id: str = Field(..., description="Output port on the source node")
    target_node_id: str = Field(..., description="Node the value flows into")
    target_port_id: str = Field(..., description="Input port on the target node")


class PortDefinition(BaseModel):
    id: str
    title: str
    dataType: DataType = DataType.ANY


class EditorDefinition(BaseModel):
    """
    Describes one editor widget bound to a key of the node's form data.
    """

    type: str = Field(..., description="Widget kind, e.g. 'number' or 'string'")
    label: str
    dataKey: str
    defaultValue: Any = None
    helperMessage: Optional[str] = None


class NodeUIData(BaseModel):
    infoBoxTitle: str = ""
    infoBoxBody: str = ""
    contextMenuTitle: str = ""
    group: List[str] = Field(default_factory=list)
