# app/schemas/user.py
"""
User schemas and the public serialization of a User.
"""
from typing import Callable

from pydantic import BaseModel, Field

from app.models.user import User

class RegistrationIn(BaseModel):
    """
    A registration payload that passed validation, ready to be hashed and stored.
    """
    username: str
    password: str = Field(repr=False)  # Plain text until hashed; kept out of repr/logs
    full_name: str | None = None

UserSerializer = Callable[[User], dict]

def serialize_user(user: User) -> dict:
    """
    Map a stored user to its public representation.

    Never includes the password digest or timestamps, and only includes
    `fullName` when the user has one.
    """
    out = {"id": str(user.id), "username": user.username}
    if user.full_name is not None:
        out["fullName"] = user.full_name
    return out
