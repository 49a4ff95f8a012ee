"""
PassThroughDelay Form

Single Responsibility: Form field definitions for the Delay node.
"""

from django import forms

from ....Core.Form.Core.BaseForm import BaseForm


class DelayForm(BaseForm):
    """Form for configuring the Delay Node."""

    delay = forms.FloatField(
        required=False,
        min_value=0,
        initial=0,
        label="Delay (ms)",
        help_text="Milliseconds to wait before passing the inputs through",
    )

    def clean_delay(self):
        delay = self.cleaned_data.get("delay")
        return 0 if delay is None else delay
