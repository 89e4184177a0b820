from .find_attendees import (
    AttendeeArg,
    FindAttendeesArgs,
    FindAttendeesJsonResponse,
    handle_find_attendees,
)

__all__ = [
    "AttendeeArg",
    "FindAttendeesArgs",
    "FindAttendeesJsonResponse",
    "handle_find_attendees",
]
