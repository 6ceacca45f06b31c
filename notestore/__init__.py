"""
notestore.

- core/: Configuration, logging, exceptions, clock
- models/: Note entity
- repositories/: In-memory note repository
- schemas/: Read-only note snapshots (pydantic)
"""
