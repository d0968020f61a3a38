"""Operation outcomes returned by the adapter façade."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Outcome(str, Enum):
    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"
    UNPROCESSABLE = "unprocessable"
    CONFLICT = "conflict"
    INTERNAL_ERROR = "internal_error"


SUCCESS_OUTCOMES = frozenset({Outcome.OK, Outcome.CREATED, Outcome.NO_CONTENT})


@dataclass(frozen=True)
class OperationResult:
    outcome: Outcome
    value: Any = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome in SUCCESS_OUTCOMES
