"""
Global pytest configuration and fixtures.
"""

import json

import pytest
import yaml


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CLI environment flags from leaking into tests."""
    monkeypatch.delenv("DOCSPEC_DEBUG", raising=False)
    monkeypatch.delenv("DOCSPEC_LAZY", raising=False)


@pytest.fixture
def point_schema():
    return {
        "type": "map",
        "fields": {
            "x": {"type": "number", "minimum": 0},
            "y": {"type": "number", "minimum": 0},
            "tags": {
                "type": "object",
                "key": "integer",
                "value": {"type": "string"},
                "option": True,
            },
        },
    }


@pytest.fixture
def schema_file(tmp_path, point_schema):
    """Write the point schema as YAML and return its path."""
    path = tmp_path / "point.yml"
    path.write_text(yaml.safe_dump(point_schema))
    return path


@pytest.fixture
def write_json(tmp_path):
    def write(name, value):
        path = tmp_path / name
        path.write_text(json.dumps(value))
        return path

    return write
