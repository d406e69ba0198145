"""Shared fixtures for the ResumeScan test suite.

HTTP traffic is replaced by ``unittest.mock`` objects standing in for a
``requests.Session`` so no test ever reaches the network.
"""

from __future__ import annotations

import json
from typing import Callable
from unittest.mock import Mock

import pytest  # type: ignore
import requests

FENCED_RESULT = (
    "```json\n"
    + json.dumps({"Keywords": [{"Keyword": "SQL", "Present": True}], "Summary": "Good fit"})
    + "\n```"
)


def make_response(status_code: int = 200, body: object = None) -> Mock:
    """Build a fake ``requests.Response`` returning ``body`` from ``json()``."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def fenced_result() -> str:
    return FENCED_RESULT


@pytest.fixture
def response_factory() -> Callable[..., Mock]:
    return make_response


@pytest.fixture
def fake_session() -> Mock:
    """A session whose ``post`` answers with the fenced ``SQL`` result."""
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(200, {"result": FENCED_RESULT})
    return session


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RESUMESCAN_ENDPOINT", "RESUMESCAN_TIMEOUT", "RESUMESCAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
