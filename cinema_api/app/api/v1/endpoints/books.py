"""
Book endpoints.

Plain CRUD over the ``books`` collection.  Bodies are accepted as any
JSON object and stored verbatim next to a generated ``id``.  Updates
merge into the stored record and deletes always succeed, even for ids
that do not exist.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from cinema_api.app.schemas.book import BOOK_EXAMPLE, Book
from cinema_api.app.services.dependencies import get_book_service
from cinema_api.app.services.record_service import RecordNotFoundError, RecordService


router = APIRouter()

_NEW_BOOK = {key: value for key, value in BOOK_EXAMPLE.items() if key != "id"}


@router.get(
    "",
    response_model=None,
    summary="Returns the list of all the books",
    responses={200: {"model": List[Book], "description": "The list of the books"}},
)
async def list_books(service: RecordService = Depends(get_book_service)) -> List[Dict[str, Any]]:
    return await service.list_records()


@router.get(
    "/{book_id}",
    response_model=None,
    summary="Get the book by id",
    responses={
        200: {"model": Book, "description": "The book description by id"},
        404: {"description": "The book was not found"},
    },
)
async def get_book(book_id: str, service: RecordService = Depends(get_book_service)) -> Dict[str, Any]:
    """Return a single book.

    Responds 404 when the id is unknown and sends nothing else.
    """
    try:
        return await service.get_record(book_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found") from e


@router.post(
    "",
    response_model=None,
    summary="Create a new book",
    responses={
        200: {"model": Book, "description": "The book was successfully created"},
        500: {"description": "Some server error"},
    },
)
async def create_book(
    fields: Dict[str, Any] = Body(..., examples=[_NEW_BOOK]),
    service: RecordService = Depends(get_book_service),
) -> Dict[str, Any]:
    """Create a book and return it with its generated id.

    An ``id`` in the body replaces the generated one.
    """
    return await service.create_record(fields)


@router.put(
    "/{book_id}",
    response_model=None,
    summary="Update the book by the id",
    responses={
        200: {"model": Book, "description": "The book was updated"},
        500: {"description": "Some error happened"},
    },
)
async def update_book(
    book_id: str,
    fields: Dict[str, Any] = Body(..., examples=[{"author": "A. K. Dewdney"}]),
    service: RecordService = Depends(get_book_service),
):
    """Merge the body into the stored book.

    An unknown id is not an error: nothing is stored and the response is
    an empty 200.
    """
    book = await service.update_record(book_id, fields)
    if book is None:
        return Response(status_code=status.HTTP_200_OK)
    return book


@router.delete(
    "/{book_id}",
    response_model=None,
    summary="Remove the book by id",
    responses={200: {"description": "The book was deleted"}},
)
async def delete_book(book_id: str, service: RecordService = Depends(get_book_service)) -> Response:
    await service.delete_record(book_id)
    return Response(status_code=status.HTTP_200_OK)
