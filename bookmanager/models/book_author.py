"""BookAuthor ORM: many-to-many link between books and authors.

Invariants:
    - Composite primary key (book_id, author_id): a pair appears at most once
    - No payload of its own
    - Rows are replaced wholesale when a book is updated
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from bookmanager.db.base import Base


class BookAuthor(Base):
    """Association row linking one book to one author."""
    __tablename__ = "book_authors"

    book_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
        index=True,
    )
