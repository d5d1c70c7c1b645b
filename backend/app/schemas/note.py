# app/schemas/note.py
"""
Pydantic schemas for folder, tag and note endpoints, plus the mappings from
stored records to API responses.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from app.models.folder import Folder
from app.models.note import Note
from app.models.tag import Tag

def _ts(value) -> Optional[str]:
    if not value:
        return None
    # Naive values are stored as UTC
    return value.isoformat() if value.tzinfo else value.isoformat() + "Z"

class NamedItemIn(BaseModel):
    """
    Request body for creating/renaming a folder or tag.
    """
    name: Optional[str] = Field(None, max_length=256)  # folders.name / tags.name width

class NoteIn(BaseModel):
    """
    Request body for creating/updating a note.
    `tags` is left untyped so that a non-list can be reported with a specific message.
    """
    title: Optional[str] = Field(None, max_length=512)  # notes.title width
    content: Optional[str] = None
    folderId: Optional[str] = None
    tags: Any = None

class NamedItemOut(BaseModel):
    """
    Folder or tag as returned by the API.
    """
    id: str
    name: str
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

class TagRef(BaseModel):
    id: str
    name: str

class NoteOut(BaseModel):
    id: str
    title: str
    content: Optional[str] = None
    folderId: Optional[str] = None
    tags: List[TagRef]
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

def serialize_folder(folder: Folder) -> dict:
    return {
        "id": str(folder.id),
        "name": folder.name,
        "createdAt": _ts(folder.created_at),
        "updatedAt": _ts(folder.updated_at),
    }

def serialize_tag(tag: Tag) -> dict:
    return {
        "id": str(tag.id),
        "name": tag.name,
        "createdAt": _ts(tag.created_at),
        "updatedAt": _ts(tag.updated_at),
    }

def serialize_note(note: Note) -> dict:
    """
    Map a note to its API shape. Tags must already be fetched
    (`fetch_related("tags")` or `prefetch_related("tags")`).
    """
    return {
        "id": str(note.id),
        "title": note.title,
        "content": note.content,
        "folderId": str(note.folder_id) if note.folder_id else None,
        "tags": [{"id": str(t.id), "name": t.name} for t in sorted(note.tags, key=lambda t: t.name)],
        "createdAt": _ts(note.created_at),
        "updatedAt": _ts(note.updated_at),
    }
