"""Initial schema: authors, books, book_authors.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("birth_date", sa.Date, nullable=False),
    )

    op.create_table(
        "books",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("price", sa.Integer, nullable=False),
        sa.Column("published_status", sa.String(20), nullable=False),
        sa.CheckConstraint("price >= 0", name="ck_books_price_non_negative"),
    )

    op.create_table(
        "book_authors",
        sa.Column(
            "book_id", sa.Integer,
            sa.ForeignKey("books.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "author_id", sa.Integer,
            sa.ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
        ),
    )
    op.create_index(
        "ix_book_authors_author_id", "book_authors", ["author_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_book_authors_author_id", table_name="book_authors")
    op.drop_table("book_authors")
    op.drop_table("books")
    op.drop_table("authors")
