"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Repositories are cheap to build, so every test gets a fresh one and no
state leaks between tests.
"""

from datetime import date

import pytest

from notestore.core.config import get_app_config
from notestore.repositories.note import NoteRepository

FIXED_DATE = date(2024, 3, 15)


# =============================================================================
# Clock Fixtures
# =============================================================================


@pytest.fixture
def fixed_clock():
    """Clock that always reports FIXED_DATE."""
    return lambda: FIXED_DATE


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def repository(fixed_clock) -> NoteRepository:
    """
    Provide an empty note repository for a single test.

    Usage:
        def test_add(repository: NoteRepository):
            note = repository.add_note("Title", "Text", {"tag"})
            assert note.id == 1
    """
    return NoteRepository(clock=fixed_clock)


@pytest.fixture
def populated_repository(repository: NoteRepository) -> NoteRepository:
    """Repository holding four notes with overlapping tags."""
    repository.add_note(
        "Sunday to-do", "Laundry, study, cooking", {"general", "home", "dayOf"}
    )
    repository.add_note(
        "Monday to-do", "Workout, study", {"work", "nature", "learning"}
    )
    repository.add_note(
        "Tuesday to-do", "Sleep, study, walk", {"general", "Escribimos"}
    )
    repository.add_note(
        "Wednesday to-do", "Cooking, study, hobby", {"genial", "home", "pensar sobre"}
    )
    return repository


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def clear_config_cache():
    """Clear lru_cache so a test gets a fresh configuration load."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()
