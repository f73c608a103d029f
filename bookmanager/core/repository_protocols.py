"""Boundary Protocols: store contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Every store method returns a fresh Author/Book snapshot, never an ORM row
    - BookStore.insert and BookStore.update are atomic across the book row and
      all of its book_authors rows

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL stores and test fakes need no
      shared base class
    - Async in Protocol: implementations do IO
"""

from collections.abc import Collection
from datetime import date
from typing import Protocol

from bookmanager.core.domain_types import (
    Author, AuthorId, Book, BookId, PublishedStatus,
)


class AuthorStore(Protocol):
    """Contract for author persistence: implemented by shell."""
    async def find_by_id(self, author_id: AuthorId) -> Author | None: ...
    async def find_existing_ids(
        self, author_ids: Collection[AuthorId],
    ) -> set[AuthorId]: ...
    async def insert(self, name: str, birthdate: date) -> Author: ...
    async def update(
        self, author_id: AuthorId, name: str, birthdate: date,
    ) -> Author: ...


class BookStore(Protocol):
    """Contract for book and book_authors persistence - implemented by shell."""
    async def find_by_id(self, book_id: BookId) -> Book | None: ...
    async def insert(
        self,
        title: str,
        price: int,
        status: PublishedStatus,
        author_ids: tuple[AuthorId, ...],
    ) -> Book: ...
    async def update(
        self,
        book_id: BookId,
        title: str,
        price: int,
        status: PublishedStatus,
        author_ids: tuple[AuthorId, ...],
    ) -> Book: ...
    async def find_books_by_author_id(self, author_id: AuthorId) -> list[Book]: ...
