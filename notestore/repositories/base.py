"""
Base Repository.

Base class for in-memory repositories with common CRUD operations.

Each repository instance owns its records and a single re-entrant lock.
Every method that touches the records holds the lock, so subclasses can
compose base operations inside their own locked sections.

Usage:
    from notestore.repositories.base import BaseRepository

    class NoteRepository(BaseRepository[Note]):
        def add_note(self, ...) -> Note:
            with self._lock:
                note = Note(self._next_id(), ...)
                self._store(note)
            self._log_operation("Note created", note_id=note.id)
            return note
"""

import threading
from typing import Any, Generic, Protocol, TypeVar

from notestore.core.logging import get_logger, log_with_source


class HasId(Protocol):
    """Anything stored in a repository is keyed by an integer id."""

    @property
    def id(self) -> int: ...


ModelType = TypeVar("ModelType", bound=HasId)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Provides:
    - Id assignment from a per-instance counter starting at 1
    - Insertion-ordered storage keyed by id
    - Mutual exclusion for every read and write
    - Logging helpers with repository context

    Ids are never reused: the counter only moves forward, even after deletes.
    """

    def __init__(self) -> None:
        self._items: dict[int, ModelType] = {}
        self._last_id = 0
        self._lock = threading.RLock()
        self._logger = get_logger(self.__class__.__module__)

    def _next_id(self) -> int:
        """
        Reserve the next id.

        Call only once the record is certain to be stored, so that a
        failed create does not consume an id. Caller must hold the lock.
        """
        self._last_id += 1
        return self._last_id

    def _store(self, instance: ModelType) -> None:
        """Store a record under its id. Caller must hold the lock."""
        self._items[instance.id] = instance

    def get_by_id_or_none(self, id: int) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        with self._lock:
            return self._items.get(id)

    def get_all(self) -> list[ModelType]:
        """Get all records in insertion order, as a new list."""
        with self._lock:
            return list(self._items.values())

    def delete(self, id: int) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if a record was removed, False if none had that id
        """
        with self._lock:
            return self._items.pop(id, None) is not None

    def exists(self, id: int) -> bool:
        """Check if a record exists by ID."""
        with self._lock:
            return id in self._items

    def count(self) -> int:
        """Get the number of stored records."""
        with self._lock:
            return len(self._items)

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a repository mutation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        log_with_source(
            self._logger,
            "repository",
            "info",
            operation,
            extra={"repository": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"repository": self.__class__.__name__, **context},
        )
