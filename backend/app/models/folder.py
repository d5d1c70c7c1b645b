# app/models/folder.py
import uuid
from tortoise import fields, models

class Folder(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=256)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="folders",
        on_delete=fields.CASCADE
    )
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "folders"
        unique_together = (("name", "user"),)  # Folder names are unique per user, not globally
