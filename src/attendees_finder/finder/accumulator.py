"""Step 2: a callback closure appending to an outer accumulator."""

from collections.abc import Callable, Iterable, Sequence

from ..contract import contract
from ..kernel import Attendee, first_name


def for_each[T](items: Iterable[T], action: Callable[[T], None]) -> None:
    for item in items:
        action(item)


@contract()
def find_by_infix_of_first_name(query: str, attendees: Sequence[Attendee]) -> list[Attendee]:
    found: list[Attendee] = []

    def collect(attendee: Attendee) -> None:
        if query in first_name(attendee):
            found.append(attendee)

    for_each(attendees, collect)
    return found
