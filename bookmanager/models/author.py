"""Author ORM: persists author rows.

Invariants:
    - id is an autoincrement integer primary key assigned on INSERT
    - name and birth_date are non-nullable
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookmanager.db.base import Base


class Author(Base):
    """Author row."""
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
