# ABOUTME: Orchestration of cache, fetch and extraction
# ABOUTME: Public entry points for reading the member count

from .service import MeetupMembersService, get_meetup_members

__all__ = ["MeetupMembersService", "get_meetup_members"]
