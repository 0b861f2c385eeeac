"""
Pydantic schemas for events returned by the GitHub public events API.

Each recognized event type has its own model with its own payload shape.
Every other type decodes into ``OtherEvent`` so that new GitHub event kinds
never break decoding.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter


class EventType(Enum):
    """
    Enum representing the event types that get a summary line.

    Attributes:
        PUSH: Commits pushed to a branch.
        CREATE: Branch, tag or repository created.
        ISSUES: Issue opened, closed, reopened, etc.
        PULL_REQUEST: Pull request opened, closed, merged, etc.
        WATCH: Repository starred.
        FORK: Repository forked.
    """

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"
    FORK = "ForkEvent"


OTHER_EVENT_TAG = "OtherEvent"


class Repository(BaseModel):
    """
    Repository an event happened in.

    Attributes:
        name (str): Fully qualified "owner/repo" name.
    """

    model_config = ConfigDict(frozen=True)

    name: str


class PushPayload(BaseModel):
    """
    Payload of a push event.

    Attributes:
        push_id (Optional[int]): Unique identifier of the push.
        size (int): Number of commits in the push.
    """

    model_config = ConfigDict(frozen=True)

    push_id: Optional[int] = None
    size: int = 0  # GitHub omits it on some pushes


class CreatePayload(BaseModel):
    """
    Payload of a create event.

    Attributes:
        ref_type (str): Kind of object created: branch, tag or repository.
        ref (Optional[str]): Name of the created ref, null for repositories.
    """

    model_config = ConfigDict(frozen=True)

    ref_type: str
    ref: Optional[str] = None


class IssueRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None


class IssuesPayload(BaseModel):
    """
    Payload of an issues event.

    Attributes:
        action (str): What happened to the issue, e.g. "opened".
        issue (Optional[IssueRef]): The issue itself.
    """

    model_config = ConfigDict(frozen=True)

    action: str
    issue: Optional[IssueRef] = None


class PullRequestRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str


class PullRequestPayload(BaseModel):
    """
    Payload of a pull request event.

    Attributes:
        action (str): What happened to the pull request, e.g. "closed".
        pull_request (PullRequestRef): The pull request itself.
    """

    model_config = ConfigDict(frozen=True)

    action: str
    pull_request: PullRequestRef


class BaseEvent(BaseModel):
    """
    Fields shared by every event.

    Attributes:
        id (Optional[str]): GitHub event ID.
        type (str): Event type tag.
        repo (Repository): Repository the event happened in.
        created_at (Optional[datetime]): When the event occurred.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    type: str
    repo: Repository
    created_at: Optional[datetime] = None


class PushEvent(BaseEvent):
    type: Literal["PushEvent"]
    payload: PushPayload


class CreateEvent(BaseEvent):
    type: Literal["CreateEvent"]
    payload: CreatePayload


class IssuesEvent(BaseEvent):
    type: Literal["IssuesEvent"]
    payload: IssuesPayload


class PullRequestEvent(BaseEvent):
    type: Literal["PullRequestEvent"]
    payload: PullRequestPayload


class WatchEvent(BaseEvent):
    type: Literal["WatchEvent"]
    payload: dict[str, Any] = Field(default_factory=dict)


class ForkEvent(BaseEvent):
    type: Literal["ForkEvent"]
    payload: dict[str, Any] = Field(default_factory=dict)


class OtherEvent(BaseEvent):
    """Any event type without a dedicated model."""

    payload: dict[str, Any] = Field(default_factory=dict)


_KNOWN_TAGS = frozenset(event_type.value for event_type in EventType)


def _event_tag(value: Any) -> str:
    """
    Pick the model tag for raw event data or an already built event.

    :param value: Raw mapping during validation, model instance during serialization.
    :return: The event type when it is recognized, otherwise the catch-all tag.
    """
    if isinstance(value, dict):
        event_type = value.get("type")
    else:
        event_type = getattr(value, "type", None)
    if isinstance(event_type, str) and event_type in _KNOWN_TAGS:
        return event_type
    # OtherEvent rejects non-string tags with a ValidationError.
    return OTHER_EVENT_TAG


GitHubEvent = Annotated[
    Union[
        Annotated[PushEvent, Tag(EventType.PUSH.value)],
        Annotated[CreateEvent, Tag(EventType.CREATE.value)],
        Annotated[IssuesEvent, Tag(EventType.ISSUES.value)],
        Annotated[PullRequestEvent, Tag(EventType.PULL_REQUEST.value)],
        Annotated[WatchEvent, Tag(EventType.WATCH.value)],
        Annotated[ForkEvent, Tag(EventType.FORK.value)],
        Annotated[OtherEvent, Tag(OTHER_EVENT_TAG)],
    ],
    Discriminator(_event_tag),
]

event_adapter: TypeAdapter[GitHubEvent] = TypeAdapter(GitHubEvent)
event_list_adapter: TypeAdapter[list[GitHubEvent]] = TypeAdapter(list[GitHubEvent])
