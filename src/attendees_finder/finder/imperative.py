"""Step 1: index walk with in-place removal."""

from collections.abc import Sequence

from ..contract import contract
from ..kernel import Attendee, first_name


@contract()
def find_by_infix_of_first_name(query: str, attendees: Sequence[Attendee]) -> list[Attendee]:
    """Remove every non-matching attendee from a copy of ``attendees`` by shifting."""
    found = list(attendees)
    i = 0
    while i < len(found):
        if query in first_name(found[i]):
            i += 1
            continue
        for j in range(i, len(found) - 1):
            found[j] = found[j + 1]
        found.pop()
    return found
