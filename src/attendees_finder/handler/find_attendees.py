import logging
from typing import TypedDict

from pydantic import BaseModel, ConfigDict, Field

from ..finder import Finder
from ..json_converter import Jsonable, JsonImmutableConverter
from ..kernel import Attendee, Query

logger = logging.getLogger(__name__)


class AttendeeArg(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    first_name: str = Field(alias="firstName")

    def to_attendee(self) -> Attendee:
        return Attendee(self.first_name)


class FindAttendeesArgs(BaseModel):
    query: Query = Query("")
    attendees: list[AttendeeArg] = Field(default_factory=list)


class FindAttendeesJsonResponse(TypedDict):
    """TypedDict for the find_attendees JSON response structure."""

    query: Query
    count: int
    attendees: Jsonable


def handle_find_attendees(
    json_converter: JsonImmutableConverter,
    args: FindAttendeesArgs,
    finder: Finder,
) -> FindAttendeesJsonResponse:
    """Handle find_attendees command.

    Parameters
    ----------
    json_converter : JsonImmutableConverter
        JSON converter for unstructuring the matched attendees.
    args : FindAttendeesArgs
        The query and the attendees to search.
    finder : Finder
        The refactoring step that performs the search.

    Returns
    -------
    FindAttendeesJsonResponse
        The query, the number of matches and the matched attendees in input order.

    Raises
    ------
    ContractViolationError
        If the finder is called in breach of its preconditions.
    """
    attendees = [arg.to_attendee() for arg in args.attendees]
    found = finder(args.query, attendees)

    logger.debug("found %d of %d attendees for query %r", len(found), len(attendees), args.query)
    return FindAttendeesJsonResponse(
        query=args.query,
        count=len(found),
        attendees=json_converter.unstructure(found),
    )
