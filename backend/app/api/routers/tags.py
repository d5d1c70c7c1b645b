# app/api/routers/tags.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from tortoise.exceptions import IntegrityError

from app.api.deps import get_current_user, parse_id
from app.config import settings
from app.core.errors import BadRequest, NotFound
from app.models.tag import Tag
from app.models.user import User
from app.schemas.note import NamedItemIn, NamedItemOut, serialize_tag

router = APIRouter(prefix="/tags", tags=["tags"])

async def _get_owned(tid: str, user: User) -> Tag:
    tag = await Tag.get_or_none(id=parse_id(tid), user=user)
    if not tag:
        raise NotFound()
    return tag

@router.get("", response_model=List[NamedItemOut])
async def list_tags(user: User = Depends(get_current_user)):
    """Get all tags of the authenticated user, ordered by name."""
    rows = await Tag.filter(user=user).order_by("name")
    return [serialize_tag(t) for t in rows]

@router.get("/{tid}", response_model=NamedItemOut)
async def get_tag(tid: str, user: User = Depends(get_current_user)):
    return serialize_tag(await _get_owned(tid, user))

@router.post("", response_model=NamedItemOut, status_code=status.HTTP_201_CREATED)
async def create_tag(body: NamedItemIn, response: Response, user: User = Depends(get_current_user)):
    """
    Create a tag for the authenticated user.

    Raises:
        BadRequest (400): name missing, or the user already has a tag with that name
    """
    if not body.name:
        raise BadRequest("Missing 'name' in request body")
    try:
        tag = await Tag.create(name=body.name, user=user)
    except IntegrityError:
        raise BadRequest("Tag name already exists")
    response.headers["Location"] = f"{settings.api_prefix}/tags/{tag.id}"
    return serialize_tag(tag)

@router.put("/{tid}", response_model=NamedItemOut)
async def update_tag(tid: str, body: NamedItemIn, user: User = Depends(get_current_user)):
    tag_id = parse_id(tid)
    if not body.name:
        raise BadRequest("Missing 'name' in request body")
    tag = await Tag.get_or_none(id=tag_id, user=user)
    if not tag:
        raise NotFound()
    tag.name = body.name
    try:
        await tag.save()
    except IntegrityError:
        raise BadRequest("Tag name already exists")
    return serialize_tag(tag)

@router.delete("/{tid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tid: str, user: User = Depends(get_current_user)):
    """
    Delete a tag and detach it from every note that carries it.
    """
    tag = await _get_owned(tid, user)
    await tag.notes.clear()
    await tag.delete()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
