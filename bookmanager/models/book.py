"""Book ORM: persists book rows; authors live in book_authors.

Invariants:
    - id is an autoincrement integer primary key assigned on INSERT
    - price is a non-negative integer (CHECK constraint)
    - published_status stores the PublishedStatus value
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookmanager.db.base import Base


class Book(Base):
    """Book row."""
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price_non_negative"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    published_status: Mapped[str] = mapped_column(
        String(20), nullable=False,
    )
