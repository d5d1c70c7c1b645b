# app/api/deps.py
import uuid

import jwt
from fastapi import Header

from app.core.errors import BadRequest, Unauthorized
from app.core.security import decode_auth_token
from app.models.user import User
from app.schemas.user import UserSerializer, serialize_user

async def get_current_user(
    authorization: str | None = Header(default=None),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Extracts the JWT from the `Authorization: Bearer <token>` header,
    validates it and loads the user it was issued for.

    Returns:
        User: The authenticated user object from database

    Raises:
        Unauthorized (401): No bearer token, invalid/expired token,
            or the user no longer exists

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"user_id": str(user.id)}
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise Unauthorized()

    try:
        payload = decode_auth_token(token)
        user_id = uuid.UUID(payload["user"]["id"])
    except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        raise Unauthorized()

    user = await User.get_or_none(id=user_id)
    if not user:
        raise Unauthorized()
    return user

def get_user_serializer() -> UserSerializer:
    """
    FastAPI dependency providing the User -> response mapping.
    Tests swap it through `app.dependency_overrides`.
    """
    return serialize_user

def parse_id(value: str | None, field: str = "id") -> uuid.UUID:
    """
    Parse a resource id from a path, query string or body.

    Raises:
        BadRequest (400): "The '<field>' is not valid"
    """
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise BadRequest(f"The '{field}' is not valid")
