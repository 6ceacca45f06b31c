"""
Core Utilities.

Shared utility functions used across the package.
All modules should import utilities from this module.
"""

from collections.abc import Callable
from datetime import date

Clock = Callable[[], date]
"""Zero-argument callable returning the current calendar date."""


def today() -> date:
    """
    Return today's date in the host's local calendar.

    This is the default clock for note creation dates. Repositories
    accept any Clock so tests can pin the date.

    Returns:
        Current local date
    """
    return date.today()
