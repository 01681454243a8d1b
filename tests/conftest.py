"""Shared fixtures."""

from unittest.mock import MagicMock

import pytest
import requests

import create_fred.config
from scaffolding import ProjectOptions


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test from an empty directory with no config overrides."""
    for var in (
        "CREATE_FRED_PROVIDER",
        "CREATE_FRED_FETCH_TIMEOUT",
        "CREATE_FRED_TEMPLATES_DIR",
        "CREATE_FRED_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(create_fred.config, "_config", None)
    yield


@pytest.fixture
def make_response():
    """Build a requests.Response stand-in."""

    def _make(status_code=200, payload=None, reason="OK"):
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.ok = status_code < 400
        response.reason = reason
        if isinstance(payload, Exception):
            response.json.side_effect = payload
        else:
            response.json.return_value = payload
        return response

    return _make


@pytest.fixture
def session():
    """A requests.Session stand-in that records calls."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def make_options():
    def _make(**overrides):
        values = {
            "project_name": "p1",
            "provider": "openai",
            "model": "gpt-4",
            "include_examples": True,
            "skip_install": True,
        }
        values.update(overrides)
        return ProjectOptions(**values)

    return _make
