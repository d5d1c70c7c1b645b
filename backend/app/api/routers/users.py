# app/api/routers/users.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from app.api.deps import get_user_serializer
from app.config import settings
from app.schemas.user import UserSerializer
from app.services.registration import register_user

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    response: Response,
    body: dict[str, Any] = Body(...),
    serialize: UserSerializer = Depends(get_user_serializer),
):
    """
    Register a new user account.

    Args:
        body: JSON object with username, password and optional fullName.
            Types are checked by the registration service, not the schema.

    Returns:
        dict: {id, username} plus fullName when provided; never the password.
        The Location header points at the new user.

    Raises:
        ValidationFailed (422): missing/mistyped/badly framed/too short/too long field
        DuplicateUsername (400): username already taken
    """
    user = await register_user(body)
    response.headers["Location"] = f"{settings.api_prefix}/users/{user.id}"
    return serialize(user)
