"""
PassThroughDelay Node Package

Waits a fixed number of milliseconds, then forwards every input to the
matching output.
"""

from .node import DelayNode
from .form import DelayForm

__all__ = ['DelayNode', 'DelayForm']
