# app/api/routers/notes.py
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from tortoise.expressions import Q

from app.api.deps import get_current_user, parse_id
from app.config import settings
from app.core.errors import BadRequest, NotFound
from app.models.folder import Folder
from app.models.note import Note
from app.models.tag import Tag
from app.models.user import User
from app.schemas.note import NoteIn, NoteOut, serialize_note

router = APIRouter(prefix="/notes", tags=["notes"])

# ===== Helpers =====
async def _get_owned(nid: str, user: User) -> Note:
    note = await Note.get_or_none(id=parse_id(nid), user=user).prefetch_related("tags")
    if not note:
        raise NotFound()
    return note

async def _resolve_folder(folder_id: str, user: User) -> Folder:
    """Look up a folder referenced by a note body; it must belong to the user."""
    folder = await Folder.get_or_none(id=parse_id(folder_id, "folderId"), user=user)
    if not folder:
        raise BadRequest("The 'folderId' is not valid")
    return folder

async def _resolve_tags(tags: Any, user: User) -> List[Tag]:
    """
    Look up the tags referenced by a note body.

    Raises:
        BadRequest (400): `tags` is not a list, or one of its ids is malformed,
            unknown or owned by another user
    """
    if not isinstance(tags, list):
        raise BadRequest("The 'tags' property must be an array")
    invalid = BadRequest("The 'tags' array contains an invalid 'id'")
    ids = set()
    for raw in tags:
        try:
            ids.add(parse_id(raw))
        except BadRequest:
            raise invalid
    found = await Tag.filter(id__in=list(ids), user=user) if ids else []
    if len(found) != len(ids):
        raise invalid
    return list(found)

# ===== Routes =====
@router.get("", response_model=List[NoteOut])
async def list_notes(
    user: User = Depends(get_current_user),
    searchTerm: Optional[str] = Query(None),
    folderId: Optional[str] = Query(None),
    tagId: Optional[str] = Query(None),
):
    """
    Get the authenticated user's notes, most recently updated first.

    Args:
        searchTerm: Case-insensitive match against title or content
        folderId: Only notes in this folder
        tagId: Only notes carrying this tag

    Raises:
        BadRequest (400): folderId or tagId is not a valid id
    """
    qs = Note.filter(user=user)
    if searchTerm:
        qs = qs.filter(Q(title__icontains=searchTerm) | Q(content__icontains=searchTerm))
    if folderId:
        qs = qs.filter(folder_id=parse_id(folderId, "folderId"))
    if tagId:
        qs = qs.filter(tags__id=parse_id(tagId, "tagId")).distinct()
    rows = await qs.order_by("-updated_at").prefetch_related("tags")
    return [serialize_note(n) for n in rows]

@router.get("/{nid}", response_model=NoteOut)
async def get_note(nid: str, user: User = Depends(get_current_user)):
    """
    Get a single note with its tags.

    Raises:
        BadRequest (400): `nid` is not a valid id
        NotFound (404): note doesn't exist or belongs to another user
    """
    return serialize_note(await _get_owned(nid, user))

@router.post("", response_model=NoteOut, status_code=status.HTTP_201_CREATED)
async def create_note(body: NoteIn, response: Response, user: User = Depends(get_current_user)):
    """
    Create a note.

    Args:
        body: title (required), content, folderId, tags (list of tag ids)

    Raises:
        BadRequest (400): missing title, or folderId/tags referencing something
            the user doesn't own
    """
    if not body.title:
        raise BadRequest("Missing 'title' in request body")
    folder = await _resolve_folder(body.folderId, user) if body.folderId else None
    tags = await _resolve_tags(body.tags, user) if body.tags is not None else []

    note = await Note.create(title=body.title, content=body.content, folder=folder, user=user)
    if tags:
        await note.tags.add(*tags)
    await note.fetch_related("tags")
    response.headers["Location"] = f"{settings.api_prefix}/notes/{note.id}"
    return serialize_note(note)

@router.put("/{nid}", response_model=NoteOut)
async def update_note(nid: str, body: NoteIn, user: User = Depends(get_current_user)):
    """
    Update the fields present in the body; absent fields are left alone.
    An empty `folderId` takes the note out of its folder.

    Raises:
        BadRequest (400): invalid id, empty title, or invalid folderId/tags
        NotFound (404): note doesn't exist or belongs to another user
    """
    note_id = parse_id(nid)
    provided = body.model_fields_set

    if "title" in provided and not body.title:
        raise BadRequest("Missing 'title' in request body")
    folder = None
    if "folderId" in provided and body.folderId:
        folder = await _resolve_folder(body.folderId, user)
    tags = None
    if "tags" in provided:
        tags = await _resolve_tags(body.tags, user)

    note = await Note.get_or_none(id=note_id, user=user)
    if not note:
        raise NotFound()
    if "title" in provided:
        note.title = body.title
    if "content" in provided:
        note.content = body.content
    if "folderId" in provided:
        note.folder = folder
    await note.save()
    if tags is not None:
        await note.tags.clear()
        if tags:
            await note.tags.add(*tags)
    await note.fetch_related("tags")
    return serialize_note(note)

@router.delete("/{nid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(nid: str, user: User = Depends(get_current_user)):
    """
    Delete a note.

    Raises:
        BadRequest (400): invalid id
        NotFound (404): note doesn't exist or belongs to another user
    """
    note = await _get_owned(nid, user)
    await note.tags.clear()
    await note.delete()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
