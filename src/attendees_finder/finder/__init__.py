"""Finders for attendees by an infix of their first name, one per refactoring step."""

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Literal

from ..kernel import Attendee
from . import (
    accumulator,
    composed,
    curried,
    extracted,
    higher_order,
    imperative,
    partially_applied,
)

type Finder = Callable[[str, Sequence[Attendee]], list[Attendee]]

StepName = Literal[
    "imperative",
    "accumulator",
    "extracted",
    "curried",
    "partially_applied",
    "higher_order",
    "composed",
]

# Kata order.
STEPS: Mapping[StepName, Finder] = MappingProxyType(
    {
        "imperative": imperative.find_by_infix_of_first_name,
        "accumulator": accumulator.find_by_infix_of_first_name,
        "extracted": extracted.find_by_infix_of_first_name,
        "curried": curried.find_by_infix_of_first_name,
        "partially_applied": partially_applied.find_by_infix_of_first_name,
        "higher_order": higher_order.find_by_infix_of_first_name,
        "composed": composed.find_by_infix_of_first_name,
    }
)

find_by_infix_of_first_name = composed.find_by_infix_of_first_name

__all__ = [
    "STEPS",
    "Finder",
    "StepName",
    "find_by_infix_of_first_name",
]
