"""
Attendees finder: find attendees whose first name contains a query.

Usage:
    from attendees_finder import Attendee, find_by_infix_of_first_name

    attendees = [Attendee("Marc"), Attendee("Christelle"), Attendee("Christophe")]
    find_by_infix_of_first_name("Chri", attendees)
    # [Attendee(first_name='Christelle'), Attendee(first_name='Christophe')]

Every refactoring step of the kata is available from ``attendees_finder.finder.STEPS``.
"""

from .contract import ContractViolationError
from .finder import STEPS, find_by_infix_of_first_name
from .kernel import Attendee

__version__ = "0.1.0"
__all__ = [
    "STEPS",
    "Attendee",
    "ContractViolationError",
    "find_by_infix_of_first_name",
]
