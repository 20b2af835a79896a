from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    FAIL = "Fail"


class ErrorKind(str, Enum):
    REQUIRED_FIELD = "RequiredField"
    NOT_A_NUMBER = "NotANumber"
    OUT_OF_RANGE = "OutOfRange"
    EMPTY_COLLECTION = "EmptyCollection"


class GradebookError(Exception):
    pass


class EmptyCollectionError(GradebookError):
    pass


@dataclass(frozen=True)
class FieldError:
    field: str
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class StudentRecord:
    name: str
    registration_number: str
    cat_score: float
    exam_score: float
    total: float
    grade: Grade
    record_id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(frozen=True)
class PassFailStats:
    pass_count: int
    fail_count: int
    pass_pct: float
    fail_pct: float


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a gradebook call: either ``value`` or the reasons it failed.

    ``errors`` carries field-level problems from a submission; ``error`` names
    a collection-level problem such as an empty gradebook.
    """

    value: T | None = None
    error: ErrorKind | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None and not self.errors

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind | None = None, errors: list[FieldError] | None = None) -> "Result[T]":
        return cls(error=error, errors=tuple(errors or ()))
