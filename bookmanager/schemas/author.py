"""Author Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - AuthorWrite.name: 1-255 chars, stripped, non-empty
    - AuthorWrite.birthdate: strictly before today
    - JSON uses camelCase aliases; snake_case also accepted on input
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from bookmanager.core.domain_types import Author


class AuthorWrite(BaseModel):
    """Author create/update body - full record, no partial patch."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1, max_length=255)
    birthdate: date

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("birthdate")
    @classmethod
    def birthdate_in_past(cls, v: date) -> date:
        if v >= date.today():
            raise ValueError("birthdate must be in the past")
        return v


class AuthorResponse(BaseModel):
    """Author response: public-facing author data."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    birthdate: date

    @classmethod
    def from_record(cls, author: Author) -> "AuthorResponse":
        return cls(id=author.id, name=author.name, birthdate=author.birthdate)
