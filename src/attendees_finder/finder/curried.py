"""Step 4: a curried predicate handed to ``filter``."""

from collections.abc import Callable, Sequence

from ..contract import contract
from ..kernel import Attendee, first_name


def matches(query: str) -> Callable[[Attendee], bool]:
    """Build a predicate closed over ``query``."""

    def predicate(attendee: Attendee) -> bool:
        return query in first_name(attendee)

    return predicate


@contract()
def find_by_infix_of_first_name(query: str, attendees: Sequence[Attendee]) -> list[Attendee]:
    return list(filter(matches(query), attendees))
