from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .content_list_viewmodel import ContentListController
from .presentation import ItemRow, ToolbarState

__all__ = [
    "BaseViewModel",
    "ContentListController",
    "ItemRow",
    "ObservableProperty",
    "Signal",
    "ToolbarState",
]
