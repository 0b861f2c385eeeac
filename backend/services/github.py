"""
Module for interacting with the GitHub API to fetch a user's public events.
"""

import asyncio
from typing import Optional

import httpx
from pydantic import ValidationError

import utils.logging
from app.schemas.event import GitHubEvent, event_list_adapter

logger = utils.logging.get_logger(__name__)

GITHUB_API_URL = "https://api.github.com"
USER_AGENT = "GitHub-Activity-CLI"
REQUEST_TIMEOUT = 10.0


class FetchError(Exception):
    """Base class for failures while fetching a user's events."""


class RequestError(FetchError):
    """The request could not be built or sent, so no status was received."""


class UserNotFoundError(FetchError):
    """GitHub answered 404 for the requested user."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"user '{username}' not found")


class UnexpectedStatusError(FetchError):
    """GitHub answered with a status other than 200 or 404."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API request failed with status: {status_code}")


class DecodeError(FetchError):
    """The response body is not a JSON array of events."""


class GitHubService:
    """
    A class to fetch public activity from the GitHub API.
    """

    _client: Optional[httpx.AsyncClient] = None
    _lock = asyncio.Lock()

    def __init__(self, user_agent: str = USER_AGENT, timeout: float = REQUEST_TIMEOUT):
        self.base_url = GITHUB_API_URL
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent}

    @classmethod
    async def get_client(cls) -> httpx.AsyncClient:
        """
        Get or create a singleton AsyncClient instance.

        Returns:
            httpx.AsyncClient: The shared AsyncClient instance.
        """
        async with cls._lock:
            if cls._client is None:
                cls._client = httpx.AsyncClient()
        return cls._client

    @classmethod
    async def close_client(cls) -> None:
        """
        Close the singleton AsyncClient instance if it exists.
        """
        if cls._client is not None:
            await cls._client.aclose()
            cls._client = None

    def events_url(self, username: str) -> str:
        """
        Build the public events URL for a user.
        :param username: GitHub username, inserted as-is.
        :return: Absolute URL of the user's public events.
        """
        return f"{self.base_url}/users/{username}/events"

    async def get(self, url: str) -> httpx.Response:
        """
        Performs a single GET request.
        :param url: Absolute URL to request.

        :raise RequestError: The request failed before a response arrived.

        :return: The response, with its body already read.
        """
        client = await self.get_client()
        logger.debug(f"GET {url}")

        try:
            # client.get reads the whole body and releases the connection.
            # httpx timeouts are per phase, wait_for bounds the whole call.
            response = await asyncio.wait_for(
                client.get(url, headers=self.headers, timeout=self.timeout),
                self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise RequestError(
                f"error making request: no complete response within {self.timeout} seconds"
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise RequestError(f"error making request: {exc}") from exc

        logger.info(f"GitHub responded {response.status_code} for {url}")
        return response

    async def get_user_events(self, username: str) -> list[GitHubEvent]:
        """
        Retrieve the most recent public events of a user.
        :param username: GitHub username of the user.

        :raise RequestError: The request failed before a response arrived.
        :raise UserNotFoundError: GitHub answered 404.
        :raise UnexpectedStatusError: GitHub answered anything else but 200.
        :raise DecodeError: The body is not a JSON array of events.

        :return: Events in the order GitHub returned them, newest first.
        """
        response = await self.get(self.events_url(username))

        if response.status_code == httpx.codes.NOT_FOUND:
            raise UserNotFoundError(username)
        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(response.status_code)

        try:
            events = event_list_adapter.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"error parsing JSON: {exc}") from exc

        logger.info(f"Decoded {len(events)} events for {username}")
        return events
