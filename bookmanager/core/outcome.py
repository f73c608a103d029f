"""Manager Outcomes: explicit success/failure values for business-rule checks.

Invariants:
    - A Failure carries only its kind, the resource type, and the offending ids
    - Outcome holds exactly one of value / failure
    - Message formatting happens in to_error(), never in the managers

Design Decisions:
    - Result values over exceptions for business rules: a rejected write is an
      expected outcome, not a fault. Store failures still propagate as exceptions
    - unwrap() is the single seam where a Failure becomes a BookManagerError
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from bookmanager.core.domain_types import PublishedStatus
from bookmanager.core.errors import (
    BookManagerError, IllegalTransitionError, NotFoundOrInvalidError,
)

T = TypeVar("T")


class FailureKind(str, Enum):
    """Business-rule failure kinds produced by the managers."""
    NOT_FOUND_OR_INVALID = "not_found_or_invalid"
    ILLEGAL_TRANSITION = "illegal_transition"


@dataclass(frozen=True)
class Failure:
    """A rejected manager operation. No write happened."""
    kind: FailureKind
    resource_type: str
    identifiers: tuple[int, ...] = ()
    current_status: PublishedStatus | None = None
    requested_status: PublishedStatus | None = None

    def to_error(self) -> BookManagerError:
        if self.kind is FailureKind.ILLEGAL_TRANSITION:
            return IllegalTransitionError(
                self.current_status.value, self.requested_status.value,
            )
        return NotFoundOrInvalidError(self.resource_type, list(self.identifiers))


def not_found_or_invalid(resource_type: str, identifiers) -> Failure:
    return Failure(
        FailureKind.NOT_FOUND_OR_INVALID, resource_type, tuple(identifiers),
    )


def illegal_transition(
    current: PublishedStatus, requested: PublishedStatus,
) -> Failure:
    return Failure(
        FailureKind.ILLEGAL_TRANSITION, "Book",
        current_status=current, requested_status=requested,
    )


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Value of a successful manager call, or the Failure that rejected it."""
    value: T | None = None
    failure: Failure | None = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: Failure) -> "Outcome[T]":
        return cls(failure=failure)

    @property
    def is_ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """Return the value or raise the mapped BookManagerError."""
        if self.failure is not None:
            raise self.failure.to_error()
        return self.value
