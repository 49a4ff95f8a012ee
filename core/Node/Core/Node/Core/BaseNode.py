import asyncio
from abc import ABC
from typing import Any

import structlog
from .Data import NodeConfig, Inputs, Outputs
from .BaseNodeProperty import BaseNodeProperty
from .BaseNodeMethod import BaseNodeMethod
from .exceptions import NodeConfigurationError

logger = structlog.get_logger(__name__)


class BaseNode(BaseNodeProperty, BaseNodeMethod, ABC):
    """
    Dont Use This Class Directly. Use One of the Subclasses Instead.
    This class is used to define the base node class and is not meant to be instantiated directly.
    use for type hinting and inheritance.
    """

    def __init__(self, node_config: NodeConfig):
        self.node_config = node_config
        self.form = self.get_form()
        self._populate_form()

    def _populate_form(self):
        """
        Populate the form with the data from the config.
        """
        if self.form is not None:
            for key, value in self.node_config.data.form.items():
                self.form.update_field(key, value)
            logger.debug("Form Populated", form=self.form.get_all_field_values(), node_id=self.node_config.id, identifier=f"{self.__class__.__name__}({self.identifier()})")

    @property
    def id(self) -> str:
        return self.node_config.id

    def update_field(self, field_name: str, value: Any) -> None:
        """
        Apply an editor change to both the form and the serialized config.
        """
        self.node_config.data.form[field_name] = value
        if self.form is not None:
            self.form.update_field(field_name, value)

    def is_ready(self) -> bool:
        """
        Validate that the node's form data passes validation.

        Returns:
            bool: True if node is ready, False otherwise.
        """
        if self.form is None:
            return True
        return self.form.validate()

    def ensure_ready(self) -> None:
        if not self.is_ready():
            raise NodeConfigurationError(self.node_config.id, self.form.get_errors())

    async def init(self):
        """
        Initialize the node.
        Validates the configuration and sets up any necessary resources.
        """
        self.ensure_ready()
        await self.setup()

    async def run(self, inputs: Inputs) -> Outputs:
        """
        Main entry point for node execution.
        Validates the configuration, then processes the inputs.

        Args:
            inputs: Payload map resolved by the runtime, keyed by input port id.

        Returns:
            Outputs: Payload map keyed by output port id.
        """
        self.ensure_ready()
        identifier = f"{self.__class__.__name__}({self.identifier()})"
        logger.info("Node execution started", node_id=self.node_config.id, identifier=identifier, input_ports=sorted(inputs))
        try:
            outputs = await self.process(inputs)
        except asyncio.CancelledError:
            logger.info("Node execution cancelled", node_id=self.node_config.id, identifier=identifier)
            raise
        except Exception as e:
            logger.exception("Node execution failed", node_id=self.node_config.id, identifier=identifier, error=str(e))
            raise
        logger.info("Node execution completed", node_id=self.node_config.id, identifier=identifier, output_ports=sorted(outputs))
        return outputs


class BlockingNode(BaseNode, ABC):
    """
    Performs work that must be completed prior to continuation.
    The runtime awaits the Blocking node before handing its outputs downstream.
    """
    pass
