# app/core/errors.py
"""
Application exception hierarchy.

Routers and services raise these; the handlers registered in app.main turn
them into JSON responses. Anything that is not a NotefulError ends up on the
generic 500 path with a fixed "Internal Server Error" message.

    NotefulError
    ├── BadRequest             400
    │   └── DuplicateUsername  400
    ├── Unauthorized           401
    ├── NotFound               404
    └── ValidationFailed       422
        ├── MissingField
        ├── WrongType
        ├── WhitespaceFraming
        ├── TooShort
        └── TooLong
"""
from typing import Any, Dict, Optional


class NotefulError(Exception):
    """Base class for errors that carry their own HTTP status and message."""

    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class BadRequest(NotefulError):
    status_code = 400
    message = "Bad Request"


class DuplicateUsername(BadRequest):
    """The store rejected a user create on the unique username index."""

    message = "Username already exists"


class Unauthorized(NotefulError):
    status_code = 401
    message = "Unauthorized"


class NotFound(NotefulError):
    status_code = 404
    message = "Not Found"


class ValidationFailed(NotefulError):
    """
    Client input failed a structural check.

    Rendered with the offending field as `location`:
        {"code": 422, "reason": "ValidationError", "message": ..., "location": ...}
    """

    status_code = 422
    reason = "ValidationError"

    def __init__(self, message: str, location: str):
        super().__init__(message)
        self.location = location

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.status_code,
            "reason": self.reason,
            "message": self.message,
            "location": self.location,
        }


class MissingField(ValidationFailed):
    def __init__(self, field: str):
        super().__init__(f"Missing '{field}' in request body", field)


class WrongType(ValidationFailed):
    def __init__(self, field: str):
        super().__init__("Incorrect field type: expected string", field)


class WhitespaceFraming(ValidationFailed):
    def __init__(self, field: str):
        super().__init__("Cannot start or end with whitespace", field)


class TooShort(ValidationFailed):
    def __init__(self, field: str, min_length: int):
        super().__init__(f"Must be at least {min_length} characters long", field)
        self.min_length = min_length


class TooLong(ValidationFailed):
    def __init__(self, field: str, max_length: int):
        super().__init__(f"Must be at most {max_length} characters long", field)
        self.max_length = max_length
