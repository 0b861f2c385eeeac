"""
Main module that runs the github-activity command line tool.
"""

import asyncio
import sys
from collections.abc import Sequence
from typing import Optional

from services.activity import display_events
from services.github import FetchError, GitHubService
from utils import logging

logger = logging.get_logger(__name__)

PROGRAM_NAME = "github-activity"
USAGE = f"Usage: {PROGRAM_NAME} <username>"


class UsageError(Exception):
    """The command line did not contain exactly one username."""


def read_username(argv: Sequence[str]) -> str:
    """
    Extract the username from the command line arguments.

    Any single argument is taken as the username, even one starting with a dash.

    :param argv: Arguments without the program name.
    :raise UsageError: Not exactly one argument was given.
    :return: The username, unvalidated.
    """
    if len(argv) != 1:
        raise UsageError(f"expected 1 argument, got {len(argv)}")
    return argv[0]


async def show_activity(username: str) -> None:
    """
    Fetch and print the recent public activity of a user.
    :param username: GitHub username.
    :raise FetchError: The events could not be fetched.
    """
    service = GitHubService()
    try:
        events = await service.get_user_events(username)
    finally:
        await GitHubService.close_client()
    display_events(events)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the tool.
    :param argv: Arguments without the program name, sys.argv when omitted.
    :return: Process exit status.
    """
    logging.setup_logger()

    try:
        username = read_username(sys.argv[1:] if argv is None else argv)
    except UsageError as exc:
        logger.info(f"Invalid arguments: {exc}")
        print(USAGE)
        return 1

    try:
        asyncio.run(show_activity(username))
    except FetchError as exc:
        logger.info(f"Fetching events for {username} failed", exc_info=exc)
        print(f"Error fetching events: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
