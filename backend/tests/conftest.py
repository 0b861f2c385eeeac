"""
Shared pytest fixtures for the github-activity tests.

Events are built through the same pydantic adapter the fetcher uses, so tests
exercise the real type dispatch. HTTP traffic goes through an
``httpx.MockTransport`` installed as the GitHubService client singleton.
"""

from collections.abc import Iterator
from typing import Any, Callable, Optional

import httpx
import pytest
from app.schemas.event import GitHubEvent, event_adapter
from services.github import GitHubService


def make_event(
    event_type: str,
    repo: str = "octo/repo",
    payload: Optional[dict[str, Any]] = None,
    **fields: Any,
) -> GitHubEvent:
    """
    Build a decoded event from raw API-shaped data.
    """
    raw = {
        "id": "1",
        "type": event_type,
        "repo": {"id": 1, "name": repo, "url": f"https://api.github.com/repos/{repo}"},
        "payload": payload if payload is not None else {},
        "created_at": "2024-05-01T12:00:00Z",
    }
    raw.update(fields)
    return event_adapter.validate_python(raw)


def raw_event(event_type: str, repo: str = "octo/repo", **payload: Any) -> dict:
    """
    Build a raw event dict as GitHub returns it.
    """
    return {
        "id": "1",
        "type": event_type,
        "actor": {"login": "octocat"},
        "repo": {"id": 1, "name": repo},
        "payload": payload,
        "public": True,
        "created_at": "2024-05-01T12:00:00Z",
    }


@pytest.fixture
def install_transport() -> Iterator[Callable]:
    """
    Install a mock-transport client as the GitHubService singleton.

    The returned callable takes a request handler and returns the list the
    handled requests are recorded in.
    """

    def _install(handler: Callable[[httpx.Request], httpx.Response]) -> list:
        requests = []

        def _recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        GitHubService._client = httpx.AsyncClient(
            transport=httpx.MockTransport(_recording_handler)
        )
        return requests

    yield _install
    GitHubService._client = None


@pytest.fixture(name="make_event")
def make_event_fixture() -> Callable[..., GitHubEvent]:
    """Provide the decoded event builder."""
    return make_event


@pytest.fixture(name="raw_event")
def raw_event_fixture() -> Callable[..., dict]:
    """Provide the raw event builder."""
    return raw_event
