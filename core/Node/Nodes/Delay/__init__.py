"""
Delay Nodes Package

Provides delay functionality for graph execution.
"""

from .PassThroughDelay import DelayNode, DelayForm

__all__ = ['DelayNode', 'DelayForm']
