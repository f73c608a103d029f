"""Book Manager: create/update rules for books and their author association.

Invariants:
    - Every rejection happens before the first store write (no partial mutation)
    - create() and update() check that every requested author exists
    - update() skips the author-existence query when the author set is unchanged
    - PUBLISHED -> UNPUBLISHED is rejected with IllegalTransition
    - list_by_author() never fails: unknown author yields an empty list

Design Decisions:
    - Reads AuthorStore directly for reference checks instead of going through
      AuthorManager (managers never call each other)
    - Decisions delegated to core/enforce_books.py; this class only sequences IO
    - No version token: two concurrent updates may both pass the transition
      check against a stale snapshot (last writer wins at the store)
"""

import logging
from collections.abc import Iterable

from bookmanager.core.domain_types import (
    AuthorId, Book, BookId, PublishedStatus,
)
from bookmanager.core.enforce_books import (
    author_set_changed,
    check_author_references,
    check_status_transition,
    normalize_author_ids,
)
from bookmanager.core.outcome import Failure, Outcome, not_found_or_invalid
from bookmanager.core.repository_protocols import AuthorStore, BookStore

logger = logging.getLogger(__name__)


class BookManager:
    """Enforces book invariants on top of a BookStore and an AuthorStore."""

    def __init__(self, books: BookStore, authors: AuthorStore):
        self.books = books
        self.authors = authors

    async def create(
        self,
        title: str,
        price: int,
        status: PublishedStatus,
        author_ids: Iterable[int],
    ) -> Outcome[Book]:
        requested = normalize_author_ids(author_ids)
        failure = await self._validate_authors(requested)
        if failure:
            self._log_rejection("create", None, failure)
            return Outcome.fail(failure)

        book = await self.books.insert(title, price, status, requested)
        logger.info(f"Book {book.id} created", extra={"book_id": book.id})
        return Outcome.ok(book)

    async def get(self, book_id: BookId) -> Outcome[Book]:
        book = await self.books.find_by_id(book_id)
        if book is None:
            return Outcome.fail(not_found_or_invalid("Book", [book_id]))
        return Outcome.ok(book)

    async def update(
        self,
        book_id: BookId,
        title: str,
        price: int,
        status: PublishedStatus,
        author_ids: Iterable[int],
    ) -> Outcome[Book]:
        """Full replace of a book, reconciling its author association."""
        current = await self.books.find_by_id(book_id)
        if current is None:
            failure = not_found_or_invalid("Book", [book_id])
            self._log_rejection("update", book_id, failure)
            return Outcome.fail(failure)

        failure = check_status_transition(current.published_status, status)
        if failure:
            self._log_rejection("update", book_id, failure)
            return Outcome.fail(failure)

        requested = normalize_author_ids(author_ids)
        if author_set_changed(current, requested):
            failure = await self._validate_authors(requested)
            if failure:
                self._log_rejection("update", book_id, failure)
                return Outcome.fail(failure)

        book = await self.books.update(book_id, title, price, status, requested)
        logger.info(f"Book {book_id} updated", extra={"book_id": book_id})
        return Outcome.ok(book)

    async def list_by_author(self, author_id: AuthorId) -> list[Book]:
        return await self.books.find_books_by_author_id(author_id)

    async def _validate_authors(
        self, requested: tuple[AuthorId, ...],
    ) -> Failure | None:
        # Empty set is rejected without a store round-trip
        existing = (
            await self.authors.find_existing_ids(requested) if requested else set()
        )
        return check_author_references(requested, existing)

    @staticmethod
    def _log_rejection(
        operation: str, book_id: BookId | None, failure: Failure,
    ) -> None:
        logger.warning(
            f"Book {operation} rejected: {failure.kind.value} "
            f"{list(failure.identifiers)}",
            extra={"book_id": book_id, "error_code": failure.kind.value},
        )
