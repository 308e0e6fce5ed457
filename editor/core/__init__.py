"""
Byte Package Builder - Core Module

Editor configuration constants.
"""

from . import constants

__all__ = ['constants']
