"""
Partial update engine.

Computes the field-level changes a patch makes to a stored record and
applies them in place. Only fields the patch carries with a value are
written; absent or null fields leave the stored value untouched. Nothing
here touches the database, callers commit the staged row.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Union

from pydantic import BaseModel

PatchLike = Union[BaseModel, Mapping[str, Any]]

USER_MUTABLE_FIELDS = ("name", "email", "email_verified_at", "image")
# Sessions may also be re-keyed, which makes their updates a replacement
SESSION_MUTABLE_FIELDS = ("id", "session_token", "user_id", "expires")


class ImmutableFieldError(ValueError):
    """Raised when a patch tries to write a field outside the mutable set."""

    def __init__(self, fields: Iterable[str]):
        self.fields = sorted(fields)
        super().__init__(f"Fields cannot be patched: {', '.join(self.fields)}")


def present_fields(patch: PatchLike) -> Dict[str, Any]:
    """Return the fields the patch carries with a non-null value."""
    if isinstance(patch, BaseModel):
        data = patch.model_dump(exclude_unset=True)
    else:
        data = dict(patch)
    return {key: value for key, value in data.items() if value is not None}


def compute_changes(existing: Any, patch: PatchLike, mutable_fields: Iterable[str]) -> Dict[str, Any]:
    """Return ``{field: new_value}`` for every present field that differs from ``existing``."""
    allowed = set(mutable_fields)
    values = present_fields(patch)
    rejected = set(values) - allowed
    if rejected:
        raise ImmutableFieldError(rejected)
    return {
        key: value
        for key, value in values.items()
        if getattr(existing, key, None) != value
    }


def apply_update(existing: Any, patch: PatchLike, mutable_fields: Iterable[str]) -> Any:
    """Write the patch's present fields onto ``existing`` and return it."""
    for key, value in compute_changes(existing, patch, mutable_fields).items():
        setattr(existing, key, value)
    return existing
