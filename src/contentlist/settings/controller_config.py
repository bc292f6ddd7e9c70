"""Immutable controller configuration built from a validated mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple

from jsonschema import ValidationError

from ..config import (
    DEFAULT_EMPTY_MESSAGE,
    DEFAULT_MAX_VISIBLE_TAGS,
    DEFAULT_SEARCHABLE_FIELDS,
    DEFAULT_SELECTION_LABEL,
)
from ..domain.models.core import ItemAction, SortDirection, ViewMode
from ..domain.models.query import SortPreset
from ..domain.services.filters import FilterCatalog, FilterDefinition, FilterOption
from ..errors import ConfigurationError
from .schema import merge_with_defaults


@dataclass(frozen=True)
class Features:
    selectable: bool = False
    searchable: bool = False
    filterable: bool = False
    sortable: bool = False
    reorderable: bool = False
    view_mode_switching: bool = False

    @property
    def has_toolbar(self) -> bool:
        return (
            self.selectable
            or self.searchable
            or self.filterable
            or self.sortable
            or self.view_mode_switching
        )


@dataclass(frozen=True)
class ControllerConfig:
    features: Features = field(default_factory=Features)
    searchable_fields: Tuple[str, ...] = DEFAULT_SEARCHABLE_FIELDS
    sortable_fields: Tuple[str, ...] = ()
    sort_presets: Tuple[SortPreset, ...] = ()
    filters: FilterCatalog = field(default_factory=FilterCatalog, compare=False)
    view_modes: Tuple[ViewMode, ...] = (ViewMode.LIST, ViewMode.GRID, ViewMode.TABLE)
    default_view_mode: ViewMode = ViewMode.LIST
    max_visible_tags: int = DEFAULT_MAX_VISIBLE_TAGS
    selection_label: str = DEFAULT_SELECTION_LABEL
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    actions: Tuple[ItemAction, ...] = ()
    more_actions: Tuple[ItemAction, ...] = ()

    @classmethod
    def from_mapping(
        cls,
        data: Optional[Mapping[str, Any]] = None,
        *,
        predicates: Optional[Mapping[str, Callable[[Any, Any], bool]]] = None,
        filters: Iterable[FilterDefinition] = (),
        actions: Iterable[ItemAction] = (),
        more_actions: Iterable[ItemAction] = (),
    ) -> ControllerConfig:
        """Validate *data* and build a configuration.

        Filters declared in *data* may be completed with a predicate from
        *predicates* (keyed by filter id); *filters* appends fully built
        definitions, typically ``custom`` ones.

        Raises:
            ConfigurationError: the mapping does not match the schema, or a
                filter / view-mode declaration is inconsistent.
        """
        try:
            merged = merge_with_defaults(dict(data) if data else None)
        except ValidationError as exc:
            raise ConfigurationError(exc.message) from exc

        predicates = dict(predicates or {})
        definitions = []
        for entry in merged["filters"]:
            definitions.append(FilterDefinition(
                id=entry["id"],
                label=entry.get("label", ""),
                kind=entry["kind"],
                field=entry.get("field"),
                options=tuple(
                    FilterOption(
                        id=opt["id"],
                        label=opt.get("label", str(opt["value"])),
                        value=opt["value"],
                        count=opt.get("count"),
                        disabled=opt.get("disabled", False),
                    )
                    for opt in entry.get("options", [])
                ),
                multiple=entry.get("multiple", False),
                placeholder=entry.get("placeholder"),
                predicate=predicates.pop(entry["id"], None),
            ))
        definitions.extend(filters)
        catalog = FilterCatalog(definitions)
        if predicates:
            raise ConfigurationError(
                f"predicates given for undeclared filters: {sorted(predicates)}"
            )

        view_modes = tuple(ViewMode(mode) for mode in merged["view_modes"])
        default_mode = ViewMode(merged["default_view_mode"])
        if default_mode not in view_modes:
            raise ConfigurationError(
                f"default view mode {default_mode.value!r} is not among {[m.value for m in view_modes]}"
            )

        return cls(
            features=Features(**merged["features"]),
            searchable_fields=tuple(merged["searchable_fields"]),
            sortable_fields=tuple(merged["sortable_fields"]),
            sort_presets=tuple(
                SortPreset(
                    id=preset["id"],
                    label=preset.get("label", preset["id"]),
                    key=preset["key"],
                    direction=SortDirection(preset.get("direction", "asc")),
                )
                for preset in merged["sort_presets"]
            ),
            filters=catalog,
            view_modes=view_modes,
            default_view_mode=default_mode,
            max_visible_tags=merged["max_visible_tags"],
            selection_label=merged["selection_label"],
            empty_message=merged["empty_message"],
            actions=tuple(actions),
            more_actions=tuple(more_actions),
        )

    def sort_preset(self, preset_id: str) -> Optional[SortPreset]:
        for preset in self.sort_presets:
            if preset.id == preset_id:
                return preset
        return None

    def action(self, action_id: str) -> Optional[ItemAction]:
        for action in self.actions + self.more_actions:
            if action.id == action_id:
                return action
        return None

    def accepts_sort_key(self, key: str) -> bool:
        return not self.sortable_fields or key in self.sortable_fields
