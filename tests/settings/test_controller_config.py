import pytest
from jsonschema import ValidationError

from contentlist.config import DEFAULT_EMPTY_MESSAGE, DEFAULT_SORT_PRESETS
from contentlist.domain.models import ItemAction, SortDirection, ViewMode
from contentlist.domain.services import FilterKind
from contentlist.errors import ConfigurationError
from contentlist.settings import DEFAULT_CONFIG, ControllerConfig, merge_with_defaults, validate_config


def test_defaults_disable_every_feature():
    config = ControllerConfig.from_mapping()
    assert not config.features.has_toolbar
    assert config.searchable_fields == ("title", "description")
    assert config.default_view_mode is ViewMode.LIST
    assert config.empty_message == DEFAULT_EMPTY_MESSAGE
    assert [preset.id for preset in config.sort_presets] == [p["id"] for p in DEFAULT_SORT_PRESETS]


def test_feature_flags_merge_over_defaults():
    merged = merge_with_defaults({"features": {"searchable": True}, "searchable_fields": ("title",)})
    assert merged["features"]["searchable"] is True
    assert merged["features"]["selectable"] is False
    assert merged["searchable_fields"] == ["title"]


def test_merge_does_not_mutate_defaults():
    merge_with_defaults({"features": {"sortable": True}})
    assert DEFAULT_CONFIG["features"]["sortable"] is False


def test_validate_config_rejects_unknown_feature():
    data = dict(DEFAULT_CONFIG, features={"pinnable": True})
    with pytest.raises(ValidationError):
        validate_config(data)


@pytest.mark.parametrize(
    "data",
    [
        {"view_modes": []},
        {"default_view_mode": "carousel"},
        {"max_visible_tags": -1},
        {"filters": [{"id": "x", "kind": "slider"}]},
        {"sort_presets": [{"id": "p", "key": "title", "direction": "up"}]},
    ],
)
def test_schema_errors_become_configuration_errors(data):
    with pytest.raises(ConfigurationError):
        ControllerConfig.from_mapping(data)


def test_default_view_mode_must_be_allowed():
    with pytest.raises(ConfigurationError):
        ControllerConfig.from_mapping({"view_modes": ["grid"], "default_view_mode": "list"})


def test_predicates_attach_to_declared_filters():
    config = ControllerConfig.from_mapping(
        {"filters": [{"id": "short", "kind": "custom"}]},
        predicates={"short": lambda item, value: True},
    )
    definition = config.filters.get("short")
    assert definition.kind is FilterKind.CUSTOM
    assert definition.predicate is not None


def test_predicate_for_undeclared_filter_is_an_error():
    with pytest.raises(ConfigurationError):
        ControllerConfig.from_mapping(predicates={"ghost": lambda item, value: True})


def test_lookup_helpers():
    edit = ItemAction("edit", "Edit")
    delete = ItemAction("delete", "Delete", variant="destructive")
    config = ControllerConfig.from_mapping(
        {"sortable_fields": ["title"]}, actions=[edit], more_actions=[delete]
    )
    assert config.action("delete") is delete
    assert config.action("delete").is_destructive
    assert config.action("share") is None
    assert config.sort_preset("date-desc").direction is SortDirection.DESC
    assert config.accepts_sort_key("title")
    assert not config.accepts_sort_key("date")


def test_date_filter_kind_is_accepted():
    config = ControllerConfig.from_mapping(
        {"filters": [{"id": "published", "label": "Published", "kind": "date", "field": "published"}]}
    )
    assert config.filters.get("published").kind is FilterKind.DATE
