"""Step 7: the predicate as a composition of a field getter and a curried test."""

from collections.abc import Callable, Sequence

from ..contract import contract
from ..functional import compose, curry
from ..kernel import Attendee, first_name
from .higher_order import keep


@curry
def contains(query: str, text: str) -> bool:
    return query in text


def matches(query: str) -> Callable[[Attendee], bool]:
    """Build ``attendee -> query in attendee.first_name``.

    Examples
    --------
    >>> matches("Chri")(Attendee("Christophe"))
    True
    >>> matches("chri")(Attendee("Christophe"))
    False
    """
    return compose(contains(query), first_name)


@contract()
def find_by_infix_of_first_name(query: str, attendees: Sequence[Attendee]) -> list[Attendee]:
    """Return, in input order, the attendees whose first name contains ``query``.

    The match is a case-sensitive substring test; an empty query keeps every
    attendee. ``attendees`` is never mutated and the result is a new list.

    Raises
    ------
    ContractViolationError
        If an element is not an Attendee or ``query`` is not a string. An
        empty ``attendees`` returns ``[]`` without inspecting ``query``.
    """
    return keep(matches(query))(attendees)
