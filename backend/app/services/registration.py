"""
User Registration

Validates a raw registration payload and creates the user.

Validation order (first failure wins):
1. required fields present       -> MissingField
2. string fields are strings     -> WrongType
3. no leading/trailing spaces    -> WhitespaceFraming
4. minimum lengths               -> TooShort
5. maximum lengths               -> TooLong

Username uniqueness is not checked here; the unique index on users.username
rejects the insert and the IntegrityError is reported as DuplicateUsername.
"""
import logging
from typing import Any, Awaitable, Callable, Mapping

from tortoise.exceptions import IntegrityError

from app.core.errors import (
    DuplicateUsername,
    MissingField,
    TooLong,
    TooShort,
    WhitespaceFraming,
    WrongType,
)
from app.core.security import hash_password_async
from app.models.user import User
from app.schemas.user import RegistrationIn

logger = logging.getLogger("uvicorn.error")

REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password", "fullName")
TRIMMED_FIELDS = ("username", "password")

# Upper bounds on username/fullName match the users table column widths
SIZED_FIELDS = {
    "username": {"min": 1, "max": 256},
    "password": {"min": 8, "max": 72},
}
FULL_NAME_MAX = 256


def validate_registration(payload: Mapping[str, Any]) -> RegistrationIn:
    """
    Check a raw registration payload.

    Parameters:
    - payload: Decoded JSON body, untyped

    Returns:
    - RegistrationIn with `fullName` trimmed; username/password unchanged

    Raises:
    - ValidationFailed subclass describing the first failed check
    """
    for field in REQUIRED_FIELDS:
        if payload.get(field) is None:
            raise MissingField(field)

    for field in STRING_FIELDS:
        value = payload.get(field)
        if value is not None and not isinstance(value, str):
            raise WrongType(field)

    for field in TRIMMED_FIELDS:
        if payload[field] != payload[field].strip():
            raise WhitespaceFraming(field)

    for field, bounds in SIZED_FIELDS.items():
        if "min" in bounds and len(payload[field]) < bounds["min"]:
            raise TooShort(field, bounds["min"])
    for field, bounds in SIZED_FIELDS.items():
        if "max" in bounds and len(payload[field]) > bounds["max"]:
            raise TooLong(field, bounds["max"])

    full_name = payload.get("fullName")
    if full_name is not None:
        full_name = full_name.strip()
        if len(full_name) > FULL_NAME_MAX:
            raise TooLong("fullName", FULL_NAME_MAX)
    return RegistrationIn(
        username=payload["username"],
        password=payload["password"],
        full_name=full_name,
    )


async def register_user(
    payload: Mapping[str, Any],
    hasher: Callable[[str], Awaitable[str]] = hash_password_async,
) -> User:
    """
    Validate a payload, hash the password and create the user.

    Exactly one insert is issued, and only after validation passed.
    A unique-index violation becomes DuplicateUsername; hashing and any
    other store failure propagate unchanged.
    """
    reg = validate_registration(payload)
    digest = await hasher(reg.password)
    try:
        user = await User.create(
            username=reg.username,
            password=digest,
            full_name=reg.full_name,
        )
    except IntegrityError as exc:
        logger.info("[users] username already taken: %s", reg.username)
        raise DuplicateUsername() from exc
    logger.info("[users] created user id=%s username=%s", user.id, user.username)
    return user
