from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

from .Data import EditorDefinition, Inputs, Outputs

if TYPE_CHECKING:
    from Node.Core.Form.Core.BaseForm import BaseForm


class BaseNodeMethod(ABC):

    async def setup(self):
        """
        setup method is not utilized directly but is called by init method.
        This method is used to initialize the node and set up any necessary resources.
        Default implementation does nothing.
        """
        pass

    @abstractmethod
    async def process(self, inputs: Inputs) -> Outputs:
        """
        Execute the node logic on a resolved input payload map.
        """
        pass

    def get_form(self) -> Optional["BaseForm"]:
        """
        Get the associated form for this node.
        Default implementation returns None.

        Returns:
            BaseForm: An instance of the form corresponding to this node, or None.
        """
        return None

    def get_editors(self) -> List[EditorDefinition]:
        """
        Editor widgets for the node's configurable fields.
        Default implementation derives them from the form, if any.
        """
        form = self.get_form()
        if form is None:
            return []
        return form.get_editor_definitions()
