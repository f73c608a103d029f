"""Book Enforcement: pure rules for author references and status transitions.

Invariants:
    - Every function is PURE: takes snapshots/ids, returns a Failure or a value
    - The shell (BookManager) does the store reads and applies the writes
    - PUBLISHED -> UNPUBLISHED is the only forbidden transition

Design Decisions:
    - Author sets compared unordered: reordering authorIds is not a change
    - Missing ids reported in request order so error messages stay readable
"""

from collections.abc import Collection, Iterable

from bookmanager.core.domain_types import AuthorId, Book, PublishedStatus
from bookmanager.core.outcome import (
    Failure, illegal_transition, not_found_or_invalid,
)


def normalize_author_ids(author_ids: Iterable[int]) -> tuple[AuthorId, ...]:
    """Collapse duplicates, keeping first-occurrence order."""
    return tuple(AuthorId(a) for a in dict.fromkeys(author_ids))


def find_missing_author_ids(
    requested: Iterable[AuthorId], existing: Collection[AuthorId],
) -> list[AuthorId]:
    """Requested ids absent from `existing`, in request order."""
    present = set(existing)
    return [a for a in requested if a not in present]


def check_author_references(
    requested: tuple[AuthorId, ...], existing: Collection[AuthorId],
) -> Failure | None:
    """Rule: a book references at least one author, and every author exists."""
    if not requested:
        return not_found_or_invalid("Author", ())
    missing = find_missing_author_ids(requested, existing)
    if missing:
        return not_found_or_invalid("Author", missing)
    return None


def check_status_transition(
    current: PublishedStatus, requested: PublishedStatus,
) -> Failure | None:
    """Rule: a published book never goes back to unpublished."""
    if (
        current is PublishedStatus.PUBLISHED
        and requested is PublishedStatus.UNPUBLISHED
    ):
        return illegal_transition(current, requested)
    return None


def author_set_changed(
    current: Book, requested: tuple[AuthorId, ...],
) -> bool:
    return set(current.author_ids) != set(requested)
