"""Books router: CRUD on the current user's collection."""

import logging
from uuid import UUID

from fastapi import APIRouter, Response, status

from bookshelf.domain.library import BookNotFoundError
from bookshelf.presentation.api.dependencies import Books, CurrentUser, DBSession
from bookshelf.presentation.api.schemas import (
    BookRequest,
    BookResponse,
    ErrorResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found"}}
_UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Not authenticated"}}


def _parse_book_id(book_id: str) -> UUID:
    # A malformed id cannot match any book
    try:
        return UUID(book_id)
    except ValueError as e:
        raise BookNotFoundError(book_id) from e


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
    responses={
        **_UNAUTHORIZED,
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "ISBN already exists"},
    },
)
async def create_book(
    request: BookRequest,
    user: CurrentUser,
    books: Books,
    session: DBSession,
) -> BookResponse:
    try:
        book = await books.create_book(
            owner_id=user.user_id,
            title=request.title,
            author=request.author,
            isbn=request.isbn,
            published_year=request.published_year,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return BookResponse.from_book(book)


@router.get("", summary="List my books", responses=_UNAUTHORIZED)
async def list_books(user: CurrentUser, books: Books) -> list[BookResponse]:
    """Return all of the caller's books, oldest first."""
    return [BookResponse.from_book(b) for b in await books.list_books(user.user_id)]


@router.get(
    "/{book_id}",
    summary="Get one of my books",
    responses={**_UNAUTHORIZED, **_NOT_FOUND},
)
async def get_book(book_id: str, user: CurrentUser, books: Books) -> BookResponse:
    """Books owned by other users are reported as not found."""
    book = await books.get_book(_parse_book_id(book_id), owner_id=user.user_id)
    return BookResponse.from_book(book)


@router.put(
    "/{book_id}",
    summary="Replace one of my books",
    responses={
        **_UNAUTHORIZED,
        **_NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "ISBN already exists"},
    },
)
async def update_book(
    book_id: str,
    request: BookRequest,
    user: CurrentUser,
    books: Books,
    session: DBSession,
) -> MessageResponse:
    try:
        await books.update_book(
            _parse_book_id(book_id),
            owner_id=user.user_id,
            title=request.title,
            author=request.author,
            isbn=request.isbn,
            published_year=request.published_year,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Book updated")


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete one of my books",
    responses={**_UNAUTHORIZED, **_NOT_FOUND},
)
async def delete_book(
    book_id: str,
    user: CurrentUser,
    books: Books,
    session: DBSession,
) -> Response:
    try:
        await books.delete_book(_parse_book_id(book_id), owner_id=user.user_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)
