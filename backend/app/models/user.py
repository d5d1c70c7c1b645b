# app/models/user.py
"""
Database model for users.
Represents a user account: login credentials plus an optional display name.
"""
import uuid
from tortoise import fields, models

from app.core.security import verify_password

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Folders, Tags and Notes (one-to-many, cascade on delete)

    Security:
    - `password` holds the argon2 digest, never the plain text
    - Username must be unique across all users (unique index, enforced by the store)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: assigned on creation
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # User login name (unique index; a duplicate insert raises IntegrityError)
    password = fields.CharField(max_length=255)  # Argon2 digest
    full_name = fields.CharField(max_length=256, null=True)  # Optional display name ("fullName" in the API)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

    def validate_password(self, plain: str) -> bool:
        """Check a plain text password against the stored digest."""
        return verify_password(plain, self.password)
