from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from auth_adapter.db import schemas
from auth_adapter.db.patching import (
    SESSION_MUTABLE_FIELDS,
    USER_MUTABLE_FIELDS,
    ImmutableFieldError,
    apply_update,
    compute_changes,
    present_fields,
)


def _user(**overrides):
    values = {
        "id": "u1",
        "name": "Alice",
        "email": "a@x.com",
        "email_verified_at": None,
        "image": "https://img/a.png",
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_empty_patch_leaves_record_unchanged():
    existing = _user()
    before = dict(vars(existing))
    result = apply_update(existing, schemas.UserUpdate(), USER_MUTABLE_FIELDS)
    assert vars(result) == before


def test_patch_writes_only_present_fields():
    existing = _user()
    apply_update(existing, schemas.UserUpdate(name="Bob"), USER_MUTABLE_FIELDS)
    assert existing.name == "Bob"
    assert existing.email == "a@x.com"
    assert existing.image == "https://img/a.png"


def test_explicit_null_does_not_clear_field():
    existing = _user()
    apply_update(existing, schemas.UserUpdate(name=None, image=None), USER_MUTABLE_FIELDS)
    assert existing.name == "Alice"
    assert existing.image == "https://img/a.png"


def test_apply_update_is_idempotent():
    patch = schemas.UserUpdate(
        email="b@x.com",
        email_verified_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    once = apply_update(_user(), patch, USER_MUTABLE_FIELDS)
    snapshot = dict(vars(once))
    twice = apply_update(once, patch, USER_MUTABLE_FIELDS)
    assert vars(twice) == snapshot


def test_compute_changes_skips_unchanged_values():
    existing = _user()
    changes = compute_changes(existing, {"name": "Alice", "email": "new@x.com"}, USER_MUTABLE_FIELDS)
    assert changes == {"email": "new@x.com"}


def test_user_identity_field_cannot_be_patched():
    existing = _user()
    with pytest.raises(ImmutableFieldError) as exc_info:
        apply_update(existing, {"id": "other", "name": "Bob"}, USER_MUTABLE_FIELDS)
    assert exc_info.value.fields == ["id"]
    assert existing.id == "u1"
    assert existing.name == "Alice"


def test_session_patch_may_replace_identity_fields():
    existing = SimpleNamespace(id="s1", session_token="tok-1", user_id="u1", expires=None)
    patch = schemas.SessionUpdate(id="s2", session_token="tok-2")
    apply_update(existing, patch, SESSION_MUTABLE_FIELDS)
    assert existing.id == "s2"
    assert existing.session_token == "tok-2"
    assert existing.user_id == "u1"


def test_present_fields_ignores_unset_model_fields():
    assert present_fields(schemas.UserUpdate(email="c@x.com")) == {"email": "c@x.com"}
    assert present_fields({"name": None, "image": "i"}) == {"image": "i"}
