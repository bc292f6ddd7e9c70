"""Expose Qt models used by collection views."""

from .content_list_model import ContentListModel
from .roles import Roles, role_names

__all__ = [
    "ContentListModel",
    "Roles",
    "role_names",
]
