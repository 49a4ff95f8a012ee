"""
Delay Node - Waits a fixed time, then passes its inputs through unchanged.

The node has no fixed shape. It offers one input port more than the highest
input wired into it, so there is always a free slot to connect, and one output
port per connected input slot. At run time it forwards as many inputs as the
payload actually carries.
"""

import asyncio
import structlog
from typing import Iterable, List, Optional

from ....Core.Node.Core import (
    BlockingNode,
    DataType,
    Inputs,
    MissingInputError,
    NodeConfig,
    NodeConfigData,
    NodeConfigurationError,
    NodeConnection,
    NodeUIData,
    Outputs,
    PortDefinition,
    VisualData,
)
from ....Core.Form.Core.BaseForm import BaseForm
from .form import DelayForm
from .._shared import (
    INPUT_PORT_PREFIX,
    MILLISECONDS_PER_SECOND,
    OUTPUT_PORT_PREFIX,
    count_input_keys,
    max_connected_input,
)

logger = structlog.get_logger(__name__)


class DelayNode(BlockingNode):
    """
    A Blocking Node that holds its inputs for a fixed number of milliseconds.

    Configuration:
    - delay: milliseconds to wait (>= 0, fractions allowed, default 0)

    Ports:
    - inputs: input1..inputK where K is the highest connected index plus one
    - outputs: output1..output(K-1)

    Example:
    - input1 and input3 connected -> input1..input4, output1..output3
    - payload {input1: "a", input2: "b"} -> {output1: "a", output2: "b"}
    """

    @classmethod
    def identifier(cls) -> str:
        return "delay"

    @classmethod
    def create(cls) -> NodeConfig:
        """Config for a freshly placed Delay node."""
        return NodeConfig(
            type=cls.identifier(),
            title="Delay",
            visualData=VisualData(x=0, y=0, width=150),
            data=NodeConfigData(form={"delay": 0}),
        )

    @property
    def label(self) -> str:
        return "Delay"

    @property
    def description(self) -> str:
        return "Delays the execution and then passes the input value to the output without any modifications."

    @classmethod
    def get_ui_data(cls) -> NodeUIData:
        return NodeUIData(
            infoBoxTitle="Delay Node",
            infoBoxBody="Delays the execution and then passes the input value to the output without any modifications.",
            contextMenuTitle="Delay",
            group=["Logic"],
        )

    def get_form(self) -> Optional[BaseForm]:
        return DelayForm()

    @property
    def delay_ms(self) -> float:
        """Validated delay in milliseconds."""
        if not self.form.validate():
            raise NodeConfigurationError(self.node_config.id, self.form.get_errors())
        return self.form.cleaned_data["delay"]

    def get_body(self) -> Optional[str]:
        return f"Delay {self.form.get_field_value('delay')}ms"

    def _get_input_port_count(self, connections: Iterable[NodeConnection]) -> int:
        return max_connected_input(self.node_config.id, connections) + 1

    def get_input_definitions(self, connections: Iterable[NodeConnection]) -> List[PortDefinition]:
        input_count = self._get_input_port_count(connections)
        return [
            PortDefinition(id=f"{INPUT_PORT_PREFIX}{i}", title=f"Input {i}", dataType=DataType.ANY)
            for i in range(1, input_count + 1)
        ]

    def get_output_definitions(self, connections: Iterable[NodeConnection]) -> List[PortDefinition]:
        output_count = max(0, self._get_input_port_count(connections) - 1)
        return [
            PortDefinition(id=f"{OUTPUT_PORT_PREFIX}{i}", title=f"Output {i}", dataType=DataType.ANY)
            for i in range(1, output_count + 1)
        ]

    async def process(self, inputs: Inputs) -> Outputs:
        """
        Wait for the configured delay, then copy input<i> to output<i>.

        Args:
            inputs: Payload map holding only the inputs that carried a value.

        Returns:
            Outputs: One entry per input key present, values passed by reference.

        Raises:
            MissingInputError: If the payload skips an input index below its count.
        """
        delay_ms = self.delay_ms

        logger.debug("Delay starting", node_id=self.node_config.id, delay_ms=delay_ms)
        try:
            await asyncio.sleep(delay_ms / MILLISECONDS_PER_SECOND)
        except asyncio.CancelledError:
            logger.info("Delay cancelled", node_id=self.node_config.id, delay_ms=delay_ms)
            raise

        present_count = count_input_keys(inputs)
        outputs: Outputs = {}
        for i in range(1, present_count + 1):
            port_id = f"{INPUT_PORT_PREFIX}{i}"
            if port_id not in inputs:
                raise MissingInputError(self.node_config.id, port_id)
            outputs[f"{OUTPUT_PORT_PREFIX}{i}"] = inputs[port_id]

        logger.debug("Delay completed", node_id=self.node_config.id, delay_ms=delay_ms, forwarded=present_count)
        return outputs
