"""ORM Models: SQLAlchemy declarative models for authors, books, book_authors.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never leave infrastructure/; stores convert them to core records

Design Decisions:
    - One file per table
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from bookmanager.models.author import Author  # noqa: F401
from bookmanager.models.book import Book  # noqa: F401
from bookmanager.models.book_author import BookAuthor  # noqa: F401
