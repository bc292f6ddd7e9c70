"""Schema helpers for content list controller configuration."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import (
    DEFAULT_EMPTY_MESSAGE,
    DEFAULT_MAX_VISIBLE_TAGS,
    DEFAULT_SEARCHABLE_FIELDS,
    DEFAULT_SELECTION_LABEL,
    DEFAULT_SORT_PRESETS,
    VIEW_MODES,
)

_FILTER_KINDS = ["checkbox", "radio", "select", "range", "date", "search", "flag", "custom"]

CONFIG_SCHEMA: dict[str, Any] = {
    "$id": "contentlist/config.schema.json",
    "type": "object",
    "required": ["schema", "features", "searchable_fields", "view_modes", "default_view_mode"],
    "properties": {
        "schema": {"const": "contentlist/config@1"},
        "features": {
            "type": "object",
            "properties": {
                "selectable": {"type": "boolean"},
                "searchable": {"type": "boolean"},
                "filterable": {"type": "boolean"},
                "sortable": {"type": "boolean"},
                "reorderable": {"type": "boolean"},
                "view_mode_switching": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "searchable_fields": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "uniqueItems": True,
        },
        "sortable_fields": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "uniqueItems": True,
        },
        "sort_presets": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "key"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "label": {"type": "string"},
                    "key": {"type": "string", "minLength": 1},
                    "direction": {"enum": ["asc", "desc"]},
                },
            },
        },
        "filters": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "kind"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "label": {"type": "string"},
                    "kind": {"enum": _FILTER_KINDS},
                    "field": {"type": ["string", "null"]},
                    "multiple": {"type": "boolean"},
                    "placeholder": {"type": ["string", "null"]},
                    "options": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["id", "value"],
                            "properties": {
                                "id": {"type": "string"},
                                "label": {"type": "string"},
                                "count": {"type": ["integer", "null"], "minimum": 0},
                                "disabled": {"type": "boolean"},
                            },
                        },
                    },
                },
            },
        },
        "view_modes": {
            "type": "array",
            "items": {"enum": list(VIEW_MODES)},
            "minItems": 1,
            "uniqueItems": True,
        },
        "default_view_mode": {"enum": list(VIEW_MODES)},
        "max_visible_tags": {"type": "integer", "minimum": 0},
        "selection_label": {"type": "string"},
        "empty_message": {"type": "string"},
    },
    "additionalProperties": True,
}

DEFAULT_CONFIG: dict[str, Any] = {
    "schema": "contentlist/config@1",
    "features": {
        "selectable": False,
        "searchable": False,
        "filterable": False,
        "sortable": False,
        "reorderable": False,
        "view_mode_switching": False,
    },
    "searchable_fields": list(DEFAULT_SEARCHABLE_FIELDS),
    "sortable_fields": [],
    "sort_presets": deepcopy(DEFAULT_SORT_PRESETS),
    "filters": [],
    "view_modes": list(VIEW_MODES),
    "default_view_mode": "list",
    "max_visible_tags": DEFAULT_MAX_VISIBLE_TAGS,
    "selection_label": DEFAULT_SELECTION_LABEL,
    "empty_message": DEFAULT_EMPTY_MESSAGE,
}

_validator = Draft202012Validator(CONFIG_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_CONFIG` and validate the result."""

    merged = deepcopy(DEFAULT_CONFIG)
    if data:
        for key, value in data.items():
            if key == "features" and isinstance(value, dict):
                target = merged.setdefault("features", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            # The validator only recognises lists as JSON arrays.
            merged[key] = list(value) if isinstance(value, tuple) else value
    _validator.validate(merged)
    return merged


def validate_config(data: dict[str, Any]) -> None:
    """Validate *data* against the configuration schema."""

    _validator.validate(data)


__all__ = ["CONFIG_SCHEMA", "DEFAULT_CONFIG", "merge_with_defaults", "validate_config"]
