"""Domain Types: identity types, status enum and immutable value records.

Invariants:
    - AuthorId, BookId wrap store-assigned integers - never reassigned after create
    - Author and Book are frozen: the core never mutates a record in place
    - Book.author_ids is a tuple with no duplicates, first-occurrence order

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - str Enum for PublishedStatus: serializes to JSON and to the DB column as-is
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AuthorId = NewType("AuthorId", int)
BookId = NewType("BookId", int)


# ─── Enums ───────────────────────────────────────────────────────

class PublishedStatus(str, Enum):
    """Book publication state: maps to DB `published_status` column."""
    UNPUBLISHED = "UNPUBLISHED"
    PUBLISHED = "PUBLISHED"


# ─── Value Records ───────────────────────────────────────────────

@dataclass(frozen=True)
class Author:
    """Authoritative author snapshot returned by an AuthorStore."""
    id: AuthorId
    name: str
    birthdate: date


@dataclass(frozen=True)
class Book:
    """Authoritative book snapshot returned by a BookStore."""
    id: BookId
    title: str
    price: int
    published_status: PublishedStatus
    author_ids: tuple[AuthorId, ...]
