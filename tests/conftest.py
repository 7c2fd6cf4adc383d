"""Pytest configuration and fixtures."""

import pytest
from edn_bridge import EdnConverter
from edn_bridge.models import Keyword, EdnMap


@pytest.fixture
def converter():
    """Default converter with no tracer or profiler."""
    return EdnConverter()


@pytest.fixture
def simple_edn_map():
    """EDN map equivalent to {:name "test" :value 42}."""
    return EdnMap(
        (Keyword("name"), Keyword("value")),
        ("test", 42)
    )


@pytest.fixture
def nested_edn_map():
    """EDN map equivalent to {:user {:id 1 :settings {:theme "dark"}}}."""
    return EdnMap(
        (Keyword("user"),),
        (EdnMap(
            (Keyword("id"), Keyword("settings")),
            (1, EdnMap((Keyword("theme"),), ("dark",)))
        ),)
    )


@pytest.fixture
def menu_json():
    """Menu document with an array of objects nested two levels down."""
    return """{
    "menu": {
        "id": "file",
        "value": "File",
        "popup": {
            "menuitem": [
                {
                    "value": "New",
                    "onclick": "CreateNewDoc()"
                },
                {
                    "value": "Open",
                    "onclick": "OpenDoc()"
                },
                {
                    "value": "Close",
                    "onclick": "CloseDoc()"
                }
            ]
        }
    }
}"""


@pytest.fixture
def sample_generic():
    """Generic value covering every JSON type."""
    return {
        "name": "widget",
        "count": 3,
        "ratio": 0.25,
        "enabled": True,
        "owner": None,
        "tags": ["a", "b"],
        "dimensions": {"width": 10, "height": 20},
        "history": [{"version": 1}, {"version": 2, "notes": []}],
        "empty": {}
    }
