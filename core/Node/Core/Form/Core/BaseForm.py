"""
Base Form Module

This module provides the base form class used to hold and validate the
editor-configurable settings of a node.

Architecture:
- BaseForm: field values, incremental updates, validation
- EDITOR_TYPES: mapping from Django field classes to editor widget kinds
"""

import django
from django.conf import settings
from django import forms
from typing import Any, Dict, List

from Node.Core.Node.Core.Data import EditorDefinition

# Configure Django settings
if not settings.configured:
    settings.configure(
        DEBUG=False,
        USE_I18N=False,
        INSTALLED_APPS=[],
    )
    django.setup()


# Checked in order, so subclasses must come before their parents
EDITOR_TYPES = [
    (forms.BooleanField, "toggle"),
    (forms.IntegerField, "number"),
    (forms.FloatField, "number"),
    (forms.DecimalField, "number"),
    (forms.ChoiceField, "dropdown"),
    (forms.CharField, "string"),
]


class BaseForm(forms.Form):
    """
    Base form class for node configuration.

    The form is always bound to a plain dict so that validation runs
    even when the node has never been edited.
    """

    def __init__(self, data=None, *args, **kwargs):
        super().__init__(dict(data or {}), *args, **kwargs)

    def update_field(self, field_name, value):
        """
        Public interface for updating fields incrementally.

        Args:
            field_name: Name of the field to update
            value: Value to set for the field
        """
        updated_data = dict(self.data)
        updated_data[field_name] = value
        self.data = updated_data
        # Force revalidation on next access
        self._errors = None

    def get_field_value(self, field_name):
        """
        Get the current value of a field, falling back to its initial value.
        """
        if field_name in self.data:
            return self.data[field_name]
        field = self.fields.get(field_name)
        return field.initial if field is not None else None

    def get_all_field_values(self) -> Dict[str, Any]:
        """
        Get all field values from the form.
        """
        return {field_name: self.get_field_value(field_name) for field_name in self.fields}

    def validate(self) -> bool:
        """
        Trigger full form validation.

        Returns:
            bool: True if form is valid, False otherwise
        """
        self.full_clean()
        return self.is_valid()

    def get_errors(self) -> Dict[str, List[str]]:
        """
        Get all form errors after validation.

        Returns:
            dict: Dictionary of field names to error lists
        """
        return {name: list(errors) for name, errors in self.errors.items()}

    def get_editor_definitions(self) -> List[EditorDefinition]:
        """
        Describe one editor widget per form field.
        """
        editors = []
        for field_name, field in self.fields.items():
            editor_type = next(
                (kind for field_cls, kind in EDITOR_TYPES if isinstance(field, field_cls)),
                "string",
            )
            editors.append(
                EditorDefinition(
                    type=editor_type,
                    label=str(field.label) if field.label else field_name,
                    dataKey=field_name,
                    defaultValue=field.initial,
                    helperMessage=str(field.help_text) if field.help_text else None,
                )
            )
        return editors
