"""
Generic entity repository.

One `EntityRepository` is configured per model with the columns that form
its lookup key and the fields its patches may write. Every database error
is rolled back and re-raised as `StorageError` so callers see one failure
type regardless of the operation.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Optional, Sequence

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from auth_adapter.db.patching import PatchLike, apply_update


class StorageError(RuntimeError):
    """A database operation failed and was rolled back."""

    def __init__(self, operation: str, entity: str, original: Exception):
        super().__init__(f"Failed to {operation} {entity}: {original}")
        self.operation = operation
        self.entity = entity
        self.original = original

    @property
    def is_conflict(self) -> bool:
        return isinstance(self.original, IntegrityError)


class EntityRepository:
    def __init__(
        self,
        model: Any,
        *,
        name: str,
        key: Sequence[str],
        mutable_fields: Iterable[str] = (),
    ):
        self.model = model
        self.name = name
        self.key = tuple(key)
        self.mutable_fields = tuple(mutable_fields)

    @contextmanager
    def guard(self, db: Session, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            db.rollback()
            raise StorageError(operation, self.name, exc) from exc

    def create(self, db: Session, payload: BaseModel):
        # Nulls are dropped so column defaults (generated ids) apply
        row = self.model(**payload.model_dump(exclude_none=True))
        with self.guard(db, "create"):
            db.add(row)
            db.commit()
            db.refresh(row)
        return row

    def first(self, db: Session, *criteria) -> Optional[Any]:
        with self.guard(db, "read"):
            return db.query(self.model).filter(*criteria).first()

    def key_criteria(self, values: Sequence[Any]):
        if len(values) != len(self.key):
            raise ValueError(f"{self.name} key expects {len(self.key)} values, got {len(values)}")
        return [getattr(self.model, column) == value for column, value in zip(self.key, values)]

    def get_by_key(self, db: Session, *values) -> Optional[Any]:
        return self.first(db, *self.key_criteria(values))

    def update(self, db: Session, row: Any, patch: PatchLike):
        apply_update(row, patch, self.mutable_fields)
        with self.guard(db, "update"):
            db.commit()
            db.refresh(row)
        return row

    def delete(self, db: Session, row: Any) -> None:
        with self.guard(db, "delete"):
            db.delete(row)
            db.commit()
