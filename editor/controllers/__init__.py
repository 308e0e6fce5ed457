"""
Byte Package Builder - Controllers Module

Application state management, event handling and persistence.
"""

from .editor_state import EditorState
from .event_handler import EventHandler
from .package_controller import PackageController
from .session_writer import SessionWriter

__all__ = ['EditorState', 'EventHandler', 'PackageController', 'SessionWriter']
