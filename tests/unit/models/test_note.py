"""
Unit Tests for Note Model.

Tests field defaults, validation on mutation, tag handling and identity.
"""

from datetime import date

import pytest

from notestore.core.exceptions import InvalidArgumentError
from notestore.models.note import DEFAULT_TEXT, DEFAULT_TITLE, Note, normalize_tag


class TestNoteCreation:
    """Tests for constructing notes."""

    def test_keeps_given_fields(self, fixed_clock):
        """Should store id, title and text as given."""
        note = Note(7, "Groceries", "Milk, eggs", clock=fixed_clock)

        assert note.id == 7
        assert note.title == "Groceries"
        assert note.text == "Milk, eggs"
        assert note.tags == frozenset()

    def test_defaults_for_missing_title_and_text(self):
        """Should substitute literal defaults when title/text are None."""
        note = Note(1)

        assert note.title == DEFAULT_TITLE == "title"
        assert note.text == DEFAULT_TEXT == "text"

    def test_empty_strings_are_not_replaced(self):
        """Only None triggers the defaults."""
        note = Note(1, "", "")

        assert note.title == ""
        assert note.text == ""

    def test_creation_date_comes_from_clock(self):
        """Should capture the clock's date once, at construction."""
        dates = iter([date(2020, 1, 1), date(2030, 1, 1)])
        note = Note(1, clock=lambda: next(dates))

        assert note.creation_date == date(2020, 1, 1)
        assert note.creation_date == date(2020, 1, 1)

    def test_default_clock_is_today(self):
        """Without a clock, the creation date is today."""
        assert Note(1).creation_date == date.today()

    def test_id_and_creation_date_are_read_only(self):
        """Should not allow reassigning id or creation date."""
        note = Note(1)

        with pytest.raises(AttributeError):
            note.id = 2
        with pytest.raises(AttributeError):
            note.creation_date = date(2000, 1, 1)


class TestNoteFieldUpdates:
    """Tests for title/text setters."""

    def test_set_title(self):
        note = Note(1, "Old", "Body")
        note.title = "New"
        assert note.title == "New"

    def test_set_text(self):
        note = Note(1, "Title", "Old body")
        note.text = "New body"
        assert note.text == "New body"

    def test_blank_values_are_accepted(self):
        """Should accept empty and whitespace-only strings."""
        note = Note(1)
        note.title = "   "
        note.text = ""

        assert note.title == "   "
        assert note.text == ""

    def test_none_title_rejected(self):
        """Should raise InvalidArgumentError and keep the old title."""
        note = Note(1, "Keep me")

        with pytest.raises(InvalidArgumentError, match="Title cannot be null") as exc_info:
            note.title = None

        assert exc_info.value.details == {"field": "title"}
        assert note.title == "Keep me"

    def test_none_text_rejected(self):
        """Should raise InvalidArgumentError and keep the old text."""
        note = Note(1, text="Keep me")

        with pytest.raises(InvalidArgumentError, match="Text cannot be null"):
            note.text = None

        assert note.text == "Keep me"


class TestNoteTags:
    """Tests for tag add/remove and read-only exposure."""

    def test_add_tag_lowercases(self):
        note = Note(1)

        assert note.add_tag("Java") is True
        assert note.tags == {"java"}

    def test_add_existing_tag_reports_false(self):
        """Should report False on a case-insensitive repeat."""
        note = Note(1)
        note.add_tag("urgent")

        assert note.add_tag("URGENT") is False
        assert note.tags == {"urgent"}

    @pytest.mark.parametrize("bad_tag", [None, "", "   ", "\t\n"])
    def test_add_rejects_null_or_blank(self, bad_tag):
        note = Note(1)

        with pytest.raises(InvalidArgumentError, match="Tag cannot be null or blank"):
            note.add_tag(bad_tag)

        assert note.tags == frozenset()

    def test_remove_tag(self):
        note = Note(1)
        note.add_tag("a")
        note.add_tag("b")

        assert note.remove_tag("A") is True
        assert note.tags == {"b"}

    def test_remove_missing_tag_reports_false(self):
        note = Note(1)
        note.add_tag("only")

        assert note.remove_tag("missing") is False
        assert note.tags == {"only"}

    @pytest.mark.parametrize("bad_tag", [None, "", "  "])
    def test_remove_rejects_null_or_blank(self, bad_tag):
        with pytest.raises(InvalidArgumentError):
            Note(1).remove_tag(bad_tag)

    def test_tags_view_is_detached_copy(self):
        """Mutating the note later must not change a view taken earlier."""
        note = Note(1)
        note.add_tag("first")
        view = note.tags

        note.add_tag("second")

        assert isinstance(view, frozenset)
        assert view == {"first"}
        assert note.tags == {"first", "second"}

    def test_has_any_tag(self):
        note = Note(1)
        note.add_tag("a")

        assert note.has_any_tag({"A", "b"}) is True
        assert note.has_any_tag({"c"}) is False
        assert note.has_any_tag(set()) is False


class TestNormalizeTag:
    """Tests for the shared tag validator."""

    def test_returns_lowercase(self):
        assert normalize_tag("MiXeD") == "mixed"

    def test_keeps_inner_whitespace(self):
        assert normalize_tag("Pensar Sobre") == "pensar sobre"

    def test_rejects_blank(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            normalize_tag(" ")
        assert exc_info.value.code == "VAL_INVALID_ARGUMENT"


class TestNoteIdentity:
    """Tests for equality and hashing by id."""

    def test_equal_when_ids_match(self):
        assert Note(3, "A", "x") == Note(3, "B", "y")

    def test_not_equal_when_ids_differ(self):
        assert Note(3, "Same", "Same") != Note(4, "Same", "Same")

    def test_hash_follows_id(self):
        notes = {Note(1, "A"), Note(1, "B"), Note(2)}
        assert len(notes) == 2

    def test_not_equal_to_other_types(self):
        assert Note(1) != 1

    def test_repr(self):
        assert repr(Note(5, "Shopping")) == "<Note(id=5, title='Shopping')>"
