"""
Rendering core: frame building and the live render loop.
"""

from .indicators import ProgressIndicators

__all__ = ["ProgressIndicators"]
