"""
Note Repository.

In-memory store for notes. Assigns ids and implements every create,
read, update, delete and search operation on the Note model.

Two "not found" conventions are used on purpose: lookups return None,
mutations return False. Only rejected input raises InvalidArgumentError.
"""

from collections.abc import Iterable

from notestore.core.exceptions import InvalidArgumentError
from notestore.core.utils import Clock, today
from notestore.models.note import Note, normalize_tag
from notestore.repositories.base import BaseRepository
from notestore.schemas.note import NoteSnapshot


def _tag_list(tags: Iterable[str | None] | None) -> list[str | None]:
    """Materialize a tag collection, refusing a bare string."""
    if tags is None:
        return []
    if isinstance(tags, str):
        raise InvalidArgumentError(
            "Tags must be a collection of strings, not a single string",
            details={"field": "tags"},
        )
    return list(tags)


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits storage, locking and id assignment from BaseRepository
    and adds note-specific mutations and queries.

    Notes returned from here are the stored entities, so edits made
    through their own setters are visible to later lookups. Collections
    (lists, tag sets) are always fresh copies.
    """

    def __init__(self, clock: Clock = today) -> None:
        super().__init__()
        self._clock = clock

    def add_note(
        self,
        title: str | None = None,
        text: str | None = None,
        tags: Iterable[str | None] | None = None,
    ) -> Note:
        """
        Create and store a new note.

        Args:
            title: Note title; "title" when None
            text: Note text; "text" when None
            tags: Optional tags, lowercased on insert

        Returns:
            Created note

        Raises:
            InvalidArgumentError: If tags is a bare string or any tag is None
                or blank. Nothing is stored and no id is consumed.
        """
        tag_list = _tag_list(tags)
        for tag in tag_list:
            normalize_tag(tag)

        with self._lock:
            note = Note(self._next_id(), title, text, clock=self._clock)
            for tag in tag_list:
                note.add_tag(tag)
            self._store(note)

        self._log_operation("Note created", note_id=note.id, tag_count=len(note.tags))
        return note

    def get_note_by_id(self, note_id: int) -> Note | None:
        """
        Get a note by ID.

        Args:
            note_id: Note ID

        Returns:
            Note if found, None otherwise
        """
        return self.get_by_id_or_none(note_id)

    def get_all_notes(self) -> list[Note]:
        """Get every stored note in creation order."""
        return self.get_all()

    def update_note_text(
        self,
        note_id: int,
        old_text: str | None,
        new_text: str,
    ) -> bool:
        """
        Replace a note's text.

        The replacement is unconditional: old_text is accepted for
        callers that pass it but is not compared against anything.

        Args:
            note_id: Note ID to update
            old_text: Ignored
            new_text: Text to store verbatim

        Returns:
            True if the note exists and was updated, False otherwise

        Raises:
            InvalidArgumentError: If new_text is None and the note exists
        """
        with self._lock:
            note = self._items.get(note_id)
            if note is None:
                return False
            note.text = new_text

        self._log_operation("Note text updated", note_id=note_id)
        return True

    def update_note_title(self, note_id: int, new_title: str) -> bool:
        """
        Replace a note's title.

        Returns:
            True if the note exists and was updated, False otherwise

        Raises:
            InvalidArgumentError: If new_title is None and the note exists
        """
        with self._lock:
            note = self._items.get(note_id)
            if note is None:
                return False
            note.title = new_title

        self._log_operation("Note title updated", note_id=note_id)
        return True

    def add_tag_to_note(self, note_id: int, tag: str) -> bool:
        """
        Add a tag to a note.

        Args:
            note_id: Note ID
            tag: Tag to add

        Returns:
            True only if the note exists and the tag was not already on it

        Raises:
            InvalidArgumentError: If tag is None or blank and the note exists
        """
        with self._lock:
            note = self._items.get(note_id)
            if note is None:
                return False
            added = note.add_tag(tag)

        if added:
            self._log_operation("Tag added", note_id=note_id, tag=tag.lower())
        return added

    def remove_tag_from_note(self, note_id: int, tag: str) -> bool:
        """
        Remove a tag from a note.

        Args:
            note_id: Note ID
            tag: Tag to remove, matched case-insensitively

        Returns:
            True only if the note exists and carried the tag

        Raises:
            InvalidArgumentError: If tag is None or blank and the note exists
        """
        with self._lock:
            note = self._items.get(note_id)
            if note is None:
                return False
            removed = note.remove_tag(tag)

        if removed:
            self._log_operation("Tag removed", note_id=note_id, tag=tag.lower())
        return removed

    def delete_note(self, note_id: int) -> bool:
        """
        Delete a note. Its id is never handed out again.

        Returns:
            True if the note existed and was removed, False otherwise
        """
        deleted = self.delete(note_id)
        if deleted:
            self._log_operation("Note deleted", note_id=note_id)
        return deleted

    def find_notes_by_text(self, query: str) -> list[Note]:
        """
        Find notes whose text contains query, ignoring case.

        An empty query matches every note.

        Args:
            query: Substring to look for

        Returns:
            Matching notes in creation order
        """
        self._log_debug("Searching notes by text", query=query)
        needle = query.lower()
        with self._lock:
            return [
                note for note in self._items.values()
                if needle in note.text.lower()
            ]

    def find_notes_by_tags(self, query_tags: Iterable[str | None]) -> list[Note]:
        """
        Find notes sharing at least one tag with query_tags, ignoring case.

        Unlike text search, an empty query matches nothing. None and
        blank entries in the query can never match and are skipped.

        Args:
            query_tags: Tags to look for

        Returns:
            Matching notes in creation order

        Raises:
            InvalidArgumentError: If query_tags is a bare string
        """
        wanted = {tag.lower() for tag in _tag_list(query_tags) if tag is not None and tag.strip()}
        self._log_debug("Searching notes by tags", tags=sorted(wanted))
        if not wanted:
            return []
        with self._lock:
            return [note for note in self._items.values() if note.has_any_tag(wanted)]

    def get_all_tags(self) -> frozenset[str]:
        """Get every distinct tag used by any note."""
        with self._lock:
            return frozenset().union(*(note.tags for note in self._items.values()))

    def snapshot(self) -> list[NoteSnapshot]:
        """
        Copy every note into an immutable snapshot.

        All notes are copied under one lock acquisition, so the result is
        a consistent view even while other threads keep mutating.

        Returns:
            Snapshots in creation order
        """
        with self._lock:
            return [NoteSnapshot.model_validate(note) for note in self._items.values()]
