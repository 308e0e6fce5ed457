"""
Byte Package Builder - Editor Package

A Pygame-based editor for assembling framed byte packages.
"""

from .application import EditorApplication
from .main import main

__all__ = ['EditorApplication', 'main']
