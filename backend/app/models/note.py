# app/models/note.py
"""
Database model for notes.
A note belongs to one user, sits in at most one folder and carries any
number of tags.
"""
import uuid
from tortoise import fields, models

class Note(models.Model):
    """
    Note database model.

    Relationships:
    - Belongs to a User (many-to-one, cascade delete)
    - Optionally belongs to a Folder (many-to-one; deleting the folder clears it)
    - Has many Tags (many-to-many through "note_tags")
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=512)
    content = fields.TextField(null=True)
    folder = fields.ForeignKeyField(
        "models.Folder",
        related_name="notes",
        null=True,
        on_delete=fields.SET_NULL
    )
    tags = fields.ManyToManyField(
        "models.Tag",
        related_name="notes",
        through="note_tags"
    )
    user = fields.ForeignKeyField(
        "models.User",
        related_name="notes",
        on_delete=fields.CASCADE
    )
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "notes"
