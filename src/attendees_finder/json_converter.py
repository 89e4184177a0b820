"""
JSON conversion of domain models using cattrs.
"""

from collections.abc import Callable
from typing import Any, TypeGuard

from cattrs.gen import make_dict_unstructure_fn, override
from cattrs.preconf.json import JsonConverter, make_converter

from .kernel import Attendee

Jsonable = None | bool | int | float | str | list["Jsonable"] | dict[str, "Jsonable"]


class ImmutableConverter[R]:
    """
    A cattrs JsonConverter wrapper that validates what it unstructures.

    Parameters
    ----------
    converter : JsonConverter
        The cattrs converter to wrap
    type_guard : Callable[[Any], TypeGuard[R]]
        Validates that an unstructured value is of type R
    """

    def __init__(
        self,
        converter: JsonConverter,
        type_guard: Callable[[Any], TypeGuard[R]],
    ) -> None:
        self._converter = converter
        self._type_guard = type_guard

    def unstructure(self, value: Any) -> R:
        """
        Convert a structured value to its unstructured representation.

        Raises
        ------
        ValueError
            If the unstructured value fails the type guard
        """
        unstructured = self._converter.unstructure(value)
        if self._type_guard(unstructured):
            return unstructured
        raise ValueError(f"unstructured value of {type(value).__name__} is not of the expected type")


class JsonImmutableConverter(ImmutableConverter[Jsonable]):
    """
    An ImmutableConverter producing JSON-safe values.

    Attendees are rendered with the wire name ``firstName``.

    Examples
    --------
    >>> converter = JsonImmutableConverter()
    >>> converter.unstructure(Attendee("Marc"))
    {'firstName': 'Marc'}
    >>> converter.unstructure([Attendee("Marc"), Attendee("Christelle")])
    [{'firstName': 'Marc'}, {'firstName': 'Christelle'}]
    """

    def __init__(self) -> None:
        converter = make_converter()
        converter.register_unstructure_hook(
            Attendee,
            make_dict_unstructure_fn(
                Attendee,
                converter,
                first_name=override(rename="firstName"),
            ),
        )

        super().__init__(converter, is_json_compatible_type)


def is_json_compatible_type(value: Any) -> TypeGuard[Jsonable]:
    """
    Check if a value is a JSON-compatible type.

    Examples
    --------
    >>> is_json_compatible_type({"firstName": "Marc"})
    True
    >>> is_json_compatible_type([None, 1, 2.5, True])
    True
    >>> is_json_compatible_type({1: "invalid_key"})
    False
    >>> is_json_compatible_type(Attendee("Marc"))
    False
    """
    if value is None:
        return True
    if isinstance(value, bool | int | float | str):
        return True
    if isinstance(value, list):
        return all(is_json_compatible_type(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(key, str) for key in value) and all(
            is_json_compatible_type(val) for val in value.values()
        )
    return False
