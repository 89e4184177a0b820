"""Attendee domain model using attrs."""

from typing import NewType

import attrs

Query = NewType("Query", str)


@attrs.define(frozen=True, slots=True)
class Attendee:
    """Domain model for an event registrant.

    Equality and hashing are structural: two attendees are equal iff their
    first names are equal.
    """

    first_name: str = attrs.field(validator=attrs.validators.instance_of(str))


def first_name(attendee: Attendee) -> str:
    """Return the first name of ``attendee``.

    Raises
    ------
    TypeError
        If ``attendee`` is not an Attendee.
    """
    if not isinstance(attendee, Attendee):
        raise TypeError(f"expected Attendee, got {type(attendee).__name__}")
    return attendee.first_name
