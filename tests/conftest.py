import os
import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from contentlist.domain.models import Item  # noqa: E402
from contentlist.gui.viewmodels import ContentListController  # noqa: E402
from contentlist.settings import ControllerConfig  # noqa: E402


ALL_FEATURES = {
    "selectable": True,
    "searchable": True,
    "filterable": True,
    "sortable": True,
    "reorderable": True,
    "view_mode_switching": True,
}


@pytest.fixture
def lessons() -> list[Item]:
    return [
        Item(
            id="l1",
            title="Breathing Basics",
            description="A calm start",
            tags=["wellness", "beginner"],
            data={"date": date(2024, 3, 1), "minutes": 5, "level": "beginner"},
        ),
        Item(
            id="l2",
            title="Focus Sprint",
            description="Short focus drills",
            tags=["focus"],
            data={"date": date(2024, 1, 15), "minutes": 10, "level": "advanced"},
        ),
        Item(
            id="l3",
            title="Evening Review",
            description="Reflect on the day",
            tags=["wellness", "habits", "evening", "journal"],
            data={"date": date(2024, 2, 10), "minutes": 5, "level": "beginner"},
        ),
        Item(
            id="l4",
            title="archived draft",
            description="Not published",
            disabled=True,
            data={"date": date(2023, 12, 1), "minutes": 1, "level": "beginner"},
        ),
    ]


@pytest.fixture
def full_config() -> ControllerConfig:
    return ControllerConfig.from_mapping(
        {
            "features": ALL_FEATURES,
            "sortable_fields": ["title", "date", "minutes"],
            "filters": [
                {
                    "id": "level",
                    "label": "Level",
                    "kind": "select",
                    "field": "level",
                    "options": [
                        {"id": "beginner", "label": "Beginner", "value": "beginner"},
                        {"id": "advanced", "label": "Advanced", "value": "advanced"},
                    ],
                },
                {
                    "id": "topics",
                    "label": "Topics",
                    "kind": "checkbox",
                    "field": "tags",
                    "multiple": True,
                    "options": [
                        {"id": "wellness", "label": "Wellness", "value": "wellness"},
                        {"id": "focus", "label": "Focus", "value": "focus"},
                    ],
                },
                {"id": "duration", "label": "Minutes", "kind": "range", "field": "minutes"},
            ],
        }
    )


@pytest.fixture
def controller(full_config, lessons) -> ContentListController:
    return ContentListController(full_config, lessons)


@pytest.fixture(scope="session")
def qapp():
    QtCore = pytest.importorskip("PySide6.QtCore", reason="PySide6 is required for model tests", exc_type=ImportError)
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QtCore.QCoreApplication([])
    yield app
