"""Kernel module for domain layer types."""

from .attendee import Attendee, Query, first_name

__all__ = [
    "Attendee",
    "Query",
    "first_name",
]
