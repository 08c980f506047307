"""Shared fixtures. Environment is pinned before the package reads its Config."""

import json
import os

os.environ["LOG_FILE"] = ""
os.environ["MOCK_DELAY_SECONDS"] = "0"
os.environ["THINKING_INTERVAL_SECONDS"] = "0.01"

from unittest import mock

import pytest
import requests

from aichatbot.ai.backends import LLMSettings


def _response(status_code=200, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body if body is not None else {})
    response._content = text.encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def fake_response():
    """Factory for requests.Response objects with a JSON (or raw text) body."""
    return _response


@pytest.fixture
def make_settings():
    def _make(model="gpt-4", api_key="sk-test", **kwargs):
        return LLMSettings(model=model, api_key=api_key, **kwargs)
    return _make


@pytest.fixture
def session():
    """A real Session whose post() is replaced by a mock."""
    s = requests.Session()
    s.post = mock.Mock(return_value=_response(200, {}))
    return s
