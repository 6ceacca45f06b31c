"""
Note Schemas.

Pydantic schemas for read-only copies of notes handed out by the repository.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class NoteSnapshot(BaseModel):
    """Immutable point-in-time copy of a note."""

    id: int = Field(gt=0, description="Note unique identifier")
    title: str = Field(description="Note title")
    text: str = Field(description="Note text")
    creation_date: date = Field(description="Date the note was created")
    tags: frozenset[str] = Field(description="Lowercased note tags")

    model_config = ConfigDict(from_attributes=True, frozen=True)
