"""Shared fixtures: settings and a JiraContext backed by httpx.MockTransport."""

import httpx
import pytest

from jira_query_mcp.config import Settings
from jira_query_mcp.context import JiraContext

JIRA_HOST = "https://jira.example.com"


@pytest.fixture
def settings():
    return Settings(jira_host=JIRA_HOST, api_token="secret-token")


@pytest.fixture
def seen_requests():
    """Requests seen by the fake tracker, in order."""
    return []


@pytest.fixture
def make_context(settings, seen_requests):
    """Build a context whose tracker answers with ``respond(request)``."""

    def _make(respond):
        def handler(request: httpx.Request) -> httpx.Response:
            seen_requests.append(request)
            return respond(request)

        return JiraContext(settings, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def sample_issue():
    return {
        "id": "10001",
        "key": "PROJ-1",
        "fields": {
            "summary": "S",
            "description": "Something is broken",
            "status": {"name": "Open"},
            "priority": {"name": "High"},
            "issuetype": {"name": "Bug"},
            "assignee": None,
            "labels": ["a", "b"],
            "created": "2024-01-02T10:00:00.000+0000",
            "updated": "2024-01-03T11:30:00.000+0000",
        },
    }
