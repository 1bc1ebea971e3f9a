# ABOUTME: Meetup member count fetcher with an on-disk, time-limited cache
# ABOUTME: Exposes the service, the convenience coroutine and the error types

from meetup_members.config import Config, get_config, reload_config
from meetup_members.core import MeetupMembersService, get_meetup_members
from meetup_members.errors import (
    ExtractionError,
    MeetupMembersError,
    MeetupPageError,
    MemberCountNotFoundError,
    NetworkError,
    PageFetchError,
)

__all__ = [
    "Config",
    "ExtractionError",
    "MeetupMembersError",
    "MeetupMembersService",
    "MeetupPageError",
    "MemberCountNotFoundError",
    "NetworkError",
    "PageFetchError",
    "get_config",
    "get_meetup_members",
    "reload_config",
]
