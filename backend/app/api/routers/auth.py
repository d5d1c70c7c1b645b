# app/api/routers/auth.py
from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_user_serializer
from app.core.errors import BadRequest, Unauthorized
from app.core.security import create_auth_token, verify_password
from app.models.user import User
from app.schemas.auth import AuthTokenOut, LoginRequest
from app.schemas.user import UserSerializer

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=AuthTokenOut)
async def login(
    payload: LoginRequest,
    serialize: UserSerializer = Depends(get_user_serializer),
):
    """
    Authenticate a user and issue an auth token.

    Args:
        payload: Request body containing username and password

    Returns:
        dict: {"authToken": <jwt>}; the token embeds the public user
        representation and the username as subject

    Raises:
        BadRequest (400): username or password missing, empty or not a string
        Unauthorized (401): unknown username or wrong password
    """
    for value in (payload.username, payload.password):
        if not isinstance(value, str) or not value:
            raise BadRequest()
    user = await User.get_or_none(username=payload.username)
    if not user or not user.validate_password(payload.password):
        raise Unauthorized()
    return {"authToken": create_auth_token(serialize(user))}

@router.post("/refresh", response_model=AuthTokenOut)
async def refresh(
    user: User = Depends(get_current_user),
    serialize: UserSerializer = Depends(get_user_serializer),
):
    """
    Exchange a valid auth token for a fresh one.

    The new token is built from the stored user, so a changed fullName is
    picked up.

    Raises:
        Unauthorized (401): missing, invalid or expired token
    """
    return {"authToken": create_auth_token(serialize(user))}
