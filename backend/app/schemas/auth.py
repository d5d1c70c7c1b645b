# app/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for login and token refresh.
"""
from typing import Any

from pydantic import BaseModel

class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Both fields are untyped at the schema level so that a missing or
    non-string credential is answered with 400 Bad Request, not a schema error.
    """
    username: Any = None  # User login name
    password: Any = None  # Plain text password, verified against the stored digest

class AuthTokenOut(BaseModel):
    """
    Response model for login and refresh.
    """
    authToken: str  # Signed JWT; send back as "Authorization: Bearer <authToken>"
