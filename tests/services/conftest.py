"""Manager test fixtures: managers wired to recording in-memory stores."""

import pytest

from bookmanager.services.author_manager import AuthorManager
from bookmanager.services.book_manager import BookManager
from tests.services.fake_stores import InMemoryAuthorStore, InMemoryBookStore


@pytest.fixture
def author_store():
    return InMemoryAuthorStore()


@pytest.fixture
def book_store():
    return InMemoryBookStore()


@pytest.fixture
def author_manager(author_store):
    return AuthorManager(author_store)


@pytest.fixture
def book_manager(book_store, author_store):
    return BookManager(book_store, author_store)
