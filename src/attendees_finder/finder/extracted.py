"""Step 3: the predicate extracted into a pure two-argument function."""

from collections.abc import Sequence

from ..contract import contract
from ..kernel import Attendee, first_name


def matches(query: str, attendee: Attendee) -> bool:
    """Tell whether the first name of ``attendee`` contains ``query``."""
    return query in first_name(attendee)


@contract()
def find_by_infix_of_first_name(query: str, attendees: Sequence[Attendee]) -> list[Attendee]:
    return [attendee for attendee in attendees if matches(query, attendee)]
