"""
Note Model.

In-memory domain entity for notes. A note validates its own fields on
every mutation, however it is reached.
"""

from collections.abc import Iterable
from datetime import date

from notestore.core.exceptions import InvalidArgumentError
from notestore.core.utils import Clock, today

DEFAULT_TITLE = "title"
DEFAULT_TEXT = "text"


def normalize_tag(tag: str | None) -> str:
    """
    Validate a tag and return its stored (lowercase) form.

    Args:
        tag: Raw tag as supplied by the caller

    Returns:
        Lowercased tag

    Raises:
        InvalidArgumentError: If tag is None, empty or whitespace-only
    """
    if tag is None or not tag.strip():
        raise InvalidArgumentError(
            "Tag cannot be null or blank",
            details={"field": "tag"},
        )
    return tag.lower()


class Note:
    """
    Note entity.

    Identity is the integer id assigned by the repository; two notes are
    equal exactly when their ids are. Title, text and tags are mutable,
    the creation date is not.
    """

    def __init__(
        self,
        id: int,
        title: str | None = None,
        text: str | None = None,
        clock: Clock = today,
    ) -> None:
        self._id = id
        self._title = title if title is not None else DEFAULT_TITLE
        self._text = text if text is not None else DEFAULT_TEXT
        self._creation_date = clock()
        self._tags: set[str] = set()

    @property
    def id(self) -> int:
        return self._id

    @property
    def creation_date(self) -> date:
        return self._creation_date

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        if value is None:
            raise InvalidArgumentError(
                "Title cannot be null",
                details={"field": "title"},
            )
        self._title = value

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if value is None:
            raise InvalidArgumentError(
                "Text cannot be null",
                details={"field": "text"},
            )
        self._text = value

    @property
    def tags(self) -> frozenset[str]:
        """Snapshot of the note's tags. Changes go through add_tag/remove_tag."""
        return frozenset(self._tags)

    def add_tag(self, tag: str) -> bool:
        """
        Add a tag to the note.

        Args:
            tag: Tag to add; stored lowercased

        Returns:
            True if the tag was added, False if it was already present

        Raises:
            InvalidArgumentError: If tag is None or blank
        """
        normalized = normalize_tag(tag)
        if normalized in self._tags:
            return False
        self._tags.add(normalized)
        return True

    def remove_tag(self, tag: str) -> bool:
        """
        Remove a tag from the note.

        Args:
            tag: Tag to remove, matched case-insensitively

        Returns:
            True if the tag was present and removed, False otherwise

        Raises:
            InvalidArgumentError: If tag is None or blank
        """
        normalized = normalize_tag(tag)
        if normalized not in self._tags:
            return False
        self._tags.remove(normalized)
        return True

    def has_any_tag(self, tags: Iterable[str]) -> bool:
        """Check whether the note shares at least one tag, ignoring case."""
        return any(tag.lower() in self._tags for tag in tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"<Note(id={self._id}, title={self._title!r})>"
