from .Core.BaseForm import BaseForm, EDITOR_TYPES
