"""Shared fixtures for incident relay unit tests."""

import json
import pytest
from unittest.mock import MagicMock

import requests

from relay_core import IncidentClient, IncidentSubmission, RelayConfig


# ---------------------------------------------------------------------------
# Fake responses returned by session.post()
# ---------------------------------------------------------------------------

def _make_response(body, status_code: int = 201, reason: str = "Created"):
    """Return a requests.Response carrying `body` (dict is JSON-encoded)."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    text = json.dumps(body) if isinstance(body, dict) else body
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    """Factory for canned ServiceNow responses."""
    return _make_response


@pytest.fixture
def config():
    return RelayConfig(hostname="dev12345.service-now.com", open_browser=False)


@pytest.fixture
def mock_session():
    """Return a MagicMock that behaves like a requests.Session."""
    session = MagicMock(spec=requests.Session)
    session.__enter__.return_value = session
    session.post.return_value = _make_response({"result": {"number": "INC0010001"}})
    return session


@pytest.fixture
def client(config, mock_session):
    return IncidentClient(config, session_factory=lambda: mock_session)


@pytest.fixture
def submission():
    return IncidentSubmission(
        short_description="printer jam",
        category="hardware",
        subcategory="printer",
        urgency="2",
        impact="2",
        caller_id="8fe6a1a983821210e5f1b3a6feaad309",
        description="Paper stuck in tray 2",
        cmdb_ci="ded5656983821210e5f1b3a6feaad3c6",
        apikey="k1",
    )
