import pytest

from attendees_finder.json_converter import JsonImmutableConverter
from attendees_finder.kernel import Attendee


@pytest.fixture
def attendees() -> list[Attendee]:
    return [Attendee("Marc"), Attendee("Christelle"), Attendee("Christophe")]


@pytest.fixture(scope="session")
def json_converter() -> JsonImmutableConverter:
    return JsonImmutableConverter()
