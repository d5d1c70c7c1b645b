"""
Services Module

Business logic that sits between the routers and the models:
- Registration: payload validation and user creation
"""

from .registration import (
    register_user,
    validate_registration,
)

__all__ = [
    "register_user",
    "validate_registration",
]
