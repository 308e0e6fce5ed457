"""
Byte Package Builder - UI Module

UI components including widgets, the row list and dialogs.
"""

from .dialogs import ConfirmDialog, PresetNameDialog
from .row_list import RowListView
from .widgets import Button, Dropdown, TextField

__all__ = [
    "Button",
    "ConfirmDialog",
    "Dropdown",
    "PresetNameDialog",
    "RowListView",
    "TextField",
]
