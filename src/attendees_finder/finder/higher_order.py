"""Step 6: generic higher-order building blocks."""

from collections.abc import Callable, Iterable, Sequence

from ..contract import contract
from ..kernel import Attendee, first_name


def keep[T](predicate: Callable[[T], bool]) -> Callable[[Iterable[T]], list[T]]:
    """Lift ``predicate`` into a function that filters a whole collection.

    Examples
    --------
    >>> keep(str.isupper)(["A", "b", "C"])
    ['A', 'C']
    """

    def keeping(items: Iterable[T]) -> list[T]:
        return [item for item in items if predicate(item)]

    return keeping


def where[T, F](getter: Callable[[T], F], test: Callable[[F], bool]) -> Callable[[T], bool]:
    """Lift a test on one field into a test on the whole record."""

    def predicate(item: T) -> bool:
        return test(getter(item))

    return predicate


def contains(query: str) -> Callable[[str], bool]:
    def test(text: str) -> bool:
        return query in text

    return test


@contract()
def find_by_infix_of_first_name(query: str, attendees: Sequence[Attendee]) -> list[Attendee]:
    return keep(where(first_name, contains(query)))(attendees)
