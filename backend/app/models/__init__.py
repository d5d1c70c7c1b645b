# app/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports throughout the application.

Models exported:
- User: User account and authentication model
- Folder: Named grouping of notes, owned by a user
- Tag: Named label attached to notes, owned by a user
- Note: Titled content record (optional folder, any number of tags)
"""
from .user import User
from .folder import Folder
from .tag import Tag
from .note import Note
