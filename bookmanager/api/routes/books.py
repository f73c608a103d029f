"""Book Routes: create, read, update books.

Invariants:
    - Unknown author ids, unknown book id, and PUBLISHED -> UNPUBLISHED
      all surface as 400 through the global BookManagerError handler
"""

from fastapi import APIRouter, Depends, status

from bookmanager.api.dependencies import get_book_manager
from bookmanager.core.domain_types import BookId
from bookmanager.schemas.book import BookResponse, BookWrite
from bookmanager.services.book_manager import BookManager

router = APIRouter(prefix="/api/v1/books", tags=["books"])


@router.post(
    "", response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookWrite, manager: BookManager = Depends(get_book_manager),
):
    """Register a new book linked to existing authors."""
    outcome = await manager.create(
        body.title, body.price, body.published_status, body.author_ids,
    )
    return BookResponse.from_record(outcome.unwrap())


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int, manager: BookManager = Depends(get_book_manager),
):
    """Get book details including author ids."""
    outcome = await manager.get(BookId(book_id))
    return BookResponse.from_record(outcome.unwrap())


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int,
    body: BookWrite,
    manager: BookManager = Depends(get_book_manager),
):
    """Replace a book and its author links."""
    outcome = await manager.update(
        BookId(book_id), body.title, body.price,
        body.published_status, body.author_ids,
    )
    return BookResponse.from_record(outcome.unwrap())
