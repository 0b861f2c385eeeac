"""
Turns GitHub events into one-line activity summaries.
"""

from collections.abc import Sequence
from typing import IO, Optional

import utils.logging
from app.schemas.event import (
    CreateEvent,
    ForkEvent,
    GitHubEvent,
    IssuesEvent,
    PullRequestEvent,
    PushEvent,
    WatchEvent,
)

logger = utils.logging.get_logger(__name__)

NO_ACTIVITY_MESSAGE = "No recent activity found"


def capitalize(text: str) -> str:
    """
    Uppercase the first character and keep the rest as is.

    Unlike ``str.capitalize`` the remainder is not lowercased.
    """
    return text[:1].upper() + text[1:]


def describe(event: GitHubEvent) -> str:
    """
    Summarize a single event.
    :param event: Decoded event.
    :return: One-line description, or an empty string for event types without a summary.
    """
    repo = event.repo.name

    if isinstance(event, PushEvent):
        return f"Pushed {event.payload.size} commits to {repo}"
    if isinstance(event, CreateEvent):
        ref = event.payload.ref or ""
        return f"Created {event.payload.ref_type} '{ref}' in {repo}"
    if isinstance(event, IssuesEvent):
        return f"{capitalize(event.payload.action)} issue in {repo}"
    if isinstance(event, PullRequestEvent):
        title = event.payload.pull_request.title
        return f"{capitalize(event.payload.action)} pull request '{title}' in {repo}"
    if isinstance(event, WatchEvent):
        return f"Starred {repo}"
    if isinstance(event, ForkEvent):
        return f"Forked {repo}"
    return ""


def render_events(events: Sequence[GitHubEvent]) -> list[str]:
    """
    Build the output lines for a list of events.
    :param events: Events in display order.
    :return: The lines to print, without trailing newlines.
    """
    if not events:
        return [NO_ACTIVITY_MESSAGE]

    lines = []
    for event in events:
        description = describe(event)
        if not description:
            logger.debug(f"Skipping {event.type} in {event.repo.name}")
            continue
        lines.append(f"- {description}")
    return lines


def display_events(events: Sequence[GitHubEvent], out: Optional[IO[str]] = None) -> None:
    """
    Print the activity summary.
    :param events: Events in display order.
    :param out: Stream to write to, standard output when omitted.
    """
    for line in render_events(events):
        print(line, file=out)
