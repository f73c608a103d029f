"""Manager Dependencies: build managers per request from the request's DB session.

Invariants:
    - Stores are constructed explicitly and passed into each manager
    - Every store of one request shares one AsyncSession
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookmanager.infrastructure.author_store import SqlAuthorStore
from bookmanager.infrastructure.book_store import SqlBookStore
from bookmanager.infrastructure.database import get_db
from bookmanager.services.author_manager import AuthorManager
from bookmanager.services.book_manager import BookManager


def get_author_manager(db: AsyncSession = Depends(get_db)) -> AuthorManager:
    return AuthorManager(SqlAuthorStore(db))


def get_book_manager(db: AsyncSession = Depends(get_db)) -> BookManager:
    return BookManager(SqlBookStore(db), SqlAuthorStore(db))
