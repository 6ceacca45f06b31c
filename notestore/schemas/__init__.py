# Pydantic schemas package
from notestore.schemas.note import NoteSnapshot

__all__ = [
    "NoteSnapshot",
]
