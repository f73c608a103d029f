"""SQL Book Store: BookStore implementation over books + book_authors.

Invariants:
    - insert() and update() run in one transaction: the book row and every
      book_authors row commit together or not at all
    - update() replaces the association wholesale (delete all, insert all)
    - Snapshots returned by insert()/update() keep the caller's author order;
      snapshots read back from the DB list author ids ascending

Design Decisions:
    - book_authors written with bulk INSERT/DELETE statements: association rows
      never enter the identity map, so delete-then-reinsert of the same
      (book_id, author_id) pair inside one session is safe
    - find_books_by_author_id loads all association rows in one extra query
"""

from collections import defaultdict

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmanager.core.domain_types import (
    AuthorId, Book, BookId, PublishedStatus,
)
from bookmanager.db.base import is_storable_id
from bookmanager.models.book import Book as BookRow
from bookmanager.models.book_author import BookAuthor


def _to_book(row: BookRow, author_ids) -> Book:
    return Book(
        id=BookId(row.id),
        title=row.title,
        price=row.price,
        published_status=PublishedStatus(row.published_status),
        author_ids=tuple(AuthorId(a) for a in author_ids),
    )


class SqlBookStore:
    """Book persistence backed by the `books` and `book_authors` tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, book_id: BookId) -> Book | None:
        """Book with its author ids in ascending order, not request order."""
        if not is_storable_id(book_id):
            return None
        result = await self.db.execute(
            select(BookRow).where(BookRow.id == book_id),
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return _to_book(row, await self._author_ids_of(book_id))

    async def insert(
        self,
        title: str,
        price: int,
        status: PublishedStatus,
        author_ids: tuple[AuthorId, ...],
    ) -> Book:
        row = BookRow(title=title, price=price, published_status=status.value)
        try:
            self.db.add(row)
            await self.db.flush()
            await self._link_authors(row.id, author_ids)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return _to_book(row, author_ids)

    async def update(
        self,
        book_id: BookId,
        title: str,
        price: int,
        status: PublishedStatus,
        author_ids: tuple[AuthorId, ...],
    ) -> Book:
        row = (
            await self.db.get(BookRow, book_id)
            if is_storable_id(book_id) else None
        )
        if row is None:
            raise LookupError(f"Book {book_id} does not exist")
        try:
            row.title = title
            row.price = price
            row.published_status = status.value
            await self.db.execute(
                delete(BookAuthor)
                .where(BookAuthor.book_id == book_id)
                .execution_options(synchronize_session=False),
            )
            await self._link_authors(book_id, author_ids)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return _to_book(row, author_ids)

    async def find_books_by_author_id(self, author_id: AuthorId) -> list[Book]:
        """Books linked to `author_id`, each with author ids ascending."""
        if not is_storable_id(author_id):
            return []
        result = await self.db.execute(
            select(BookRow)
            .join(BookAuthor, BookAuthor.book_id == BookRow.id)
            .where(BookAuthor.author_id == author_id)
            .order_by(BookRow.id),
        )
        rows = result.scalars().all()
        if not rows:
            return []

        links = await self.db.execute(
            select(BookAuthor.book_id, BookAuthor.author_id)
            .where(BookAuthor.book_id.in_([r.id for r in rows]))
            .order_by(BookAuthor.book_id, BookAuthor.author_id),
        )
        authors_by_book: dict[int, list[int]] = defaultdict(list)
        for book_id, linked_author_id in links.all():
            authors_by_book[book_id].append(linked_author_id)

        return [_to_book(r, authors_by_book[r.id]) for r in rows]

    async def _author_ids_of(self, book_id: BookId) -> list[int]:
        result = await self.db.execute(
            select(BookAuthor.author_id)
            .where(BookAuthor.book_id == book_id)
            .order_by(BookAuthor.author_id),
        )
        return list(result.scalars().all())

    async def _link_authors(
        self, book_id: int, author_ids: tuple[AuthorId, ...],
    ) -> None:
        if not author_ids:
            return
        await self.db.execute(
            insert(BookAuthor),
            [{"book_id": book_id, "author_id": a} for a in author_ids],
        )
