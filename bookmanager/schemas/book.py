"""Book Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - BookWrite.title: 1-255 chars, stripped, non-empty
    - BookWrite.price: integer >= 0
    - BookWrite.author_ids: at least one id (existence is checked by BookManager)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from bookmanager.core.domain_types import Book, PublishedStatus


class BookWrite(BaseModel):
    """Book create/update body - full record, no partial patch."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=255)
    price: int = Field(ge=0)
    published_status: PublishedStatus
    author_ids: list[int] = Field(min_length=1)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class BookResponse(BaseModel):
    """Book response: author ids included."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    price: int
    published_status: PublishedStatus
    author_ids: list[int]

    @classmethod
    def from_record(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id,
            title=book.title,
            price=book.price,
            published_status=book.published_status,
            author_ids=list(book.author_ids),
        )
