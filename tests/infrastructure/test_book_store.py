"""SQL Book Store: book rows plus the book_authors association.

Tests cover:
    - insert/find_by_id round-trip with the full author set
    - update replaces the association wholesale
    - insert/update are atomic: a failing association write leaves nothing behind
    - find_books_by_author_id populates each book's full author set
"""

from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from bookmanager.core.domain_types import AuthorId, BookId, PublishedStatus
from bookmanager.infrastructure.author_store import SqlAuthorStore
from bookmanager.infrastructure.book_store import SqlBookStore
from bookmanager.models.book import Book as BookRow
from bookmanager.models.book_author import BookAuthor


@pytest.fixture
async def author_ids(test_db):
    authors = SqlAuthorStore(test_db)
    created = [
        await authors.insert(name, date(1970, 1, 1))
        for name in ("A", "B", "C")
    ]
    return [a.id for a in created]


@pytest.fixture
def store(test_db):
    return SqlBookStore(test_db)


async def _count(db, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def test_insert_round_trip(store, author_ids):
    created = await store.insert(
        "Go in Action", 1500, PublishedStatus.PUBLISHED, (author_ids[1], author_ids[0]),
    )

    assert created.author_ids == (author_ids[1], author_ids[0])
    found = await store.find_by_id(created.id)
    assert found.title == "Go in Action"
    assert found.price == 1500
    assert found.published_status is PublishedStatus.PUBLISHED
    assert set(found.author_ids) == set(created.author_ids)


async def test_find_by_id_unknown_returns_none(store):
    assert await store.find_by_id(BookId(404)) is None


async def test_update_replaces_association(store, author_ids, test_db):
    a, b, c = author_ids
    created = await store.insert("T", 100, PublishedStatus.UNPUBLISHED, (a, b))

    updated = await store.update(
        created.id, "T2", 200, PublishedStatus.PUBLISHED, (b, c),
    )

    assert updated.author_ids == (b, c)
    found = await store.find_by_id(created.id)
    assert found.title == "T2"
    assert found.price == 200
    assert found.published_status is PublishedStatus.PUBLISHED
    assert set(found.author_ids) == {b, c}
    assert await _count(test_db, BookAuthor) == 2


async def test_update_with_same_authors_reinserts_cleanly(store, author_ids):
    a, b, _ = author_ids
    created = await store.insert("T", 100, PublishedStatus.UNPUBLISHED, (a, b))

    await store.update(created.id, "T", 100, PublishedStatus.UNPUBLISHED, (b, a))

    assert set((await store.find_by_id(created.id)).author_ids) == {a, b}


async def test_insert_is_atomic(store, author_ids, test_db):
    a = author_ids[0]

    # Duplicate (book_id, author_id) violates the association primary key
    with pytest.raises(IntegrityError):
        await store.insert("Broken", 1, PublishedStatus.UNPUBLISHED, (a, a))

    assert await _count(test_db, BookRow) == 0
    assert await _count(test_db, BookAuthor) == 0


async def test_update_is_atomic(store, author_ids):
    a, b, _ = author_ids
    created = await store.insert("Original", 100, PublishedStatus.UNPUBLISHED, (a,))

    with pytest.raises(IntegrityError):
        await store.update(
            created.id, "Changed", 999, PublishedStatus.PUBLISHED, (b, b),
        )

    found = await store.find_by_id(created.id)
    assert found.title == "Original"
    assert found.published_status is PublishedStatus.UNPUBLISHED
    assert found.author_ids == (a,)


async def test_update_unknown_raises(store):
    with pytest.raises(LookupError):
        await store.update(BookId(1), "T", 1, PublishedStatus.PUBLISHED, (AuthorId(1),))


async def test_find_books_by_author_id(store, author_ids):
    a, b, c = author_ids
    first = await store.insert("First", 1, PublishedStatus.PUBLISHED, (a, b))
    second = await store.insert("Second", 2, PublishedStatus.UNPUBLISHED, (b,))
    await store.insert("Third", 3, PublishedStatus.UNPUBLISHED, (c,))

    books = await store.find_books_by_author_id(b)

    assert [bk.id for bk in books] == [first.id, second.id]
    assert set(books[0].author_ids) == {a, b}
    assert books[1].author_ids == (b,)


async def test_find_books_by_unknown_author_is_empty(store, author_ids):
    assert await store.find_books_by_author_id(AuthorId(999)) == []


async def test_out_of_range_ids_are_absent(store):
    assert await store.find_by_id(BookId(2**63)) is None
    assert await store.find_books_by_author_id(AuthorId(2**63)) == []
    with pytest.raises(LookupError):
        await store.update(
            BookId(2**63), "T", 1, PublishedStatus.PUBLISHED, (AuthorId(1),),
        )


async def test_reads_return_author_ids_ascending(store, author_ids):
    a, b, c = sorted(author_ids)
    created = await store.insert("T", 1, PublishedStatus.PUBLISHED, (c, a, b))

    assert created.author_ids == (c, a, b)
    assert (await store.find_by_id(created.id)).author_ids == (a, b, c)
    [listed] = await store.find_books_by_author_id(a)
    assert listed.author_ids == (a, b, c)
