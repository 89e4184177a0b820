"""Step 5: the two-argument predicate bound to the query with ``functools.partial``."""

from collections.abc import Sequence
from functools import partial

from ..contract import contract
from ..kernel import Attendee
from .extracted import matches


@contract()
def find_by_infix_of_first_name(query: str, attendees: Sequence[Attendee]) -> list[Attendee]:
    return list(filter(partial(matches, query), attendees))
