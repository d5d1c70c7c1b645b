# app/api/routers/folders.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from tortoise.exceptions import IntegrityError

from app.api.deps import get_current_user, parse_id
from app.config import settings
from app.core.errors import BadRequest, NotFound
from app.models.folder import Folder
from app.models.note import Note
from app.models.user import User
from app.schemas.note import NamedItemIn, NamedItemOut, serialize_folder

router = APIRouter(prefix="/folders", tags=["folders"])

async def _get_owned(fid: str, user: User) -> Folder:
    folder = await Folder.get_or_none(id=parse_id(fid), user=user)
    if not folder:
        raise NotFound()
    return folder

def _require_name(body: NamedItemIn) -> str:
    if not body.name:
        raise BadRequest("Missing 'name' in request body")
    return body.name

@router.get("", response_model=List[NamedItemOut])
async def list_folders(user: User = Depends(get_current_user)):
    """
    Get all folders of the authenticated user, ordered by name.
    """
    rows = await Folder.filter(user=user).order_by("name")
    return [serialize_folder(f) for f in rows]

@router.get("/{fid}", response_model=NamedItemOut)
async def get_folder(fid: str, user: User = Depends(get_current_user)):
    """
    Get a single folder.

    Raises:
        BadRequest (400): `fid` is not a valid id
        NotFound (404): folder doesn't exist or belongs to another user
    """
    return serialize_folder(await _get_owned(fid, user))

@router.post("", response_model=NamedItemOut, status_code=status.HTTP_201_CREATED)
async def create_folder(body: NamedItemIn, response: Response, user: User = Depends(get_current_user)):
    """
    Create a folder for the authenticated user.

    Raises:
        BadRequest (400): name missing, or the user already has a folder with that name
    """
    name = _require_name(body)
    try:
        folder = await Folder.create(name=name, user=user)
    except IntegrityError:
        raise BadRequest("Folder name already exists")
    response.headers["Location"] = f"{settings.api_prefix}/folders/{folder.id}"
    return serialize_folder(folder)

@router.put("/{fid}", response_model=NamedItemOut)
async def update_folder(fid: str, body: NamedItemIn, user: User = Depends(get_current_user)):
    """
    Rename a folder.

    Raises:
        BadRequest (400): invalid id, missing name or duplicate name
        NotFound (404): folder doesn't exist or belongs to another user
    """
    folder_id = parse_id(fid)
    name = _require_name(body)
    folder = await Folder.get_or_none(id=folder_id, user=user)
    if not folder:
        raise NotFound()
    folder.name = name
    try:
        await folder.save()
    except IntegrityError:
        raise BadRequest("Folder name already exists")
    return serialize_folder(folder)

@router.delete("/{fid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_folder(fid: str, user: User = Depends(get_current_user)):
    """
    Delete a folder. Notes inside it are kept and lose their folder.

    Raises:
        BadRequest (400): invalid id
        NotFound (404): folder doesn't exist or belongs to another user
    """
    folder = await _get_owned(fid, user)
    # Detach notes first (FK is SET NULL, but manual is clearer)
    await Note.filter(folder_id=folder.id).update(folder_id=None)
    await folder.delete()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
