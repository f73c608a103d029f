"""SQLAlchemy Declarative Base: shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all book manager ORM models."""
    pass


# Integer primary keys are int4 on PostgreSQL
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """True if `value` fits an `Integer` id column. Larger ids can't exist."""
    return ID_MIN <= value <= ID_MAX
