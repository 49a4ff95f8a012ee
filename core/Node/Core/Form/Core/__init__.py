"""
Core components for node configuration forms.
"""
from .BaseForm import BaseForm, EDITOR_TYPES
