# app/models/tag.py
import uuid
from tortoise import fields, models

class Tag(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=256)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="tags",
        on_delete=fields.CASCADE
    )
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "tags"
        unique_together = (("name", "user"),)  # Same name may be reused by another user
