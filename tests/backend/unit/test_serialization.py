"""
Unit tests for the public User mapping.
"""
import uuid
from types import SimpleNamespace

from app.schemas.user import serialize_user


def _user(**overrides):
    fields = {
        "id": uuid.uuid4(),
        "username": "testuser",
        "password": "$argon2id$v=19$m=65536,t=3,p=4$fake",
        "full_name": "Test User",
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_serialize_user_with_full_name():
    user = _user()
    out = serialize_user(user)
    assert out == {"id": str(user.id), "username": "testuser", "fullName": "Test User"}


def test_serialize_user_omits_missing_full_name():
    out = serialize_user(_user(full_name=None))
    assert set(out) == {"id", "username"}


def test_serialize_user_never_exposes_password():
    out = serialize_user(_user())
    assert "password" not in out
    assert all("argon2" not in str(v) for v in out.values())


def test_serialize_user_keeps_empty_full_name():
    out = serialize_user(_user(full_name=""))
    assert out["fullName"] == ""
