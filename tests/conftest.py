"""Pytest configuration and fixtures."""

import pytest
from json_flattener import FlattenerConfig, SurroundedArrayFormatting


@pytest.fixture
def canonical_json():
    """Nested document mixing arrays, empty containers and empty keys."""
    return {
        "a": {
            "b": [1, 2.0, "c", None, True, {}, []],
            "": "my_key_is_empty"
        },
        "": "my_key_is_also_empty"
    }


@pytest.fixture
def bracket_config():
    """Configuration using ``[i]`` array indices."""
    return FlattenerConfig(array_formatting=SurroundedArrayFormatting("[", "]"))


@pytest.fixture
def sample_nested_json():
    """Sample nested JSON for testing."""
    return {
        "users": [
            {
                "name": "Alice",
                "profile": {"age": 30, "city": "New York"},
                "tags": ["admin", "dev"]
            },
            {
                "name": "Bob",
                "profile": {"age": 25, "city": "San Francisco"},
                "tags": []
            }
        ],
        "settings": {
            "theme": "dark",
            "notifications": True,
            "limits": {}
        }
    }
