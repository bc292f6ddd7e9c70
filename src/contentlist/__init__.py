"""Headless selection, query and reorder state for list/grid collection views."""

from .domain.models import DragState, Item, ItemAction, MetaEntry, QueryState, SortDirection, ViewMode
from .domain.services import FilterDefinition, FilterKind, FilterOption, derive_view, move_item
from .errors import ConfigurationError, ContentListError
from .gui.viewmodels import ContentListController
from .settings import ControllerConfig

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ContentListController",
    "ContentListError",
    "ControllerConfig",
    "DragState",
    "FilterDefinition",
    "FilterKind",
    "FilterOption",
    "Item",
    "ItemAction",
    "MetaEntry",
    "QueryState",
    "SortDirection",
    "ViewMode",
    "derive_view",
    "move_item",
]
