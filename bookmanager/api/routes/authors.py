"""Author Routes: create, read, update authors and list their books.

Invariants:
    - Manager Outcome failures are raised via unwrap() and mapped to 400
      by the global BookManagerError handler
    - GET /{id}/books never fails for an unknown author (empty list)
"""

from fastapi import APIRouter, Depends, status

from bookmanager.api.dependencies import get_author_manager, get_book_manager
from bookmanager.core.domain_types import AuthorId
from bookmanager.schemas.author import AuthorResponse, AuthorWrite
from bookmanager.schemas.book import BookResponse
from bookmanager.services.author_manager import AuthorManager
from bookmanager.services.book_manager import BookManager

router = APIRouter(prefix="/api/v1/authors", tags=["authors"])


@router.post(
    "", response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: AuthorWrite, manager: AuthorManager = Depends(get_author_manager),
):
    """Register a new author."""
    outcome = await manager.create(body.name, body.birthdate)
    return AuthorResponse.from_record(outcome.unwrap())


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int, manager: AuthorManager = Depends(get_author_manager),
):
    """Get author details."""
    outcome = await manager.get(AuthorId(author_id))
    return AuthorResponse.from_record(outcome.unwrap())


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: int,
    body: AuthorWrite,
    manager: AuthorManager = Depends(get_author_manager),
):
    """Replace name and birthdate of an existing author."""
    outcome = await manager.update(AuthorId(author_id), body.name, body.birthdate)
    return AuthorResponse.from_record(outcome.unwrap())


@router.get("/{author_id}/books", response_model=list[BookResponse])
async def list_author_books(
    author_id: int, manager: BookManager = Depends(get_book_manager),
):
    """List every book the author is linked to."""
    books = await manager.list_by_author(AuthorId(author_id))
    return [BookResponse.from_record(b) for b in books]
