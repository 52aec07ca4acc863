"""
Movie endpoints (QuanLyPhim).

Same contract as the book endpoints, over the ``movies`` collection.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from cinema_api.app.schemas.movie import MOVIE_EXAMPLE, Movie
from cinema_api.app.services.dependencies import get_movie_service
from cinema_api.app.services.record_service import RecordNotFoundError, RecordService


router = APIRouter()


@router.post(
    "",
    response_model=None,
    summary="Thêm phim",
    responses={
        200: {"model": Movie, "description": "The Movies was successfully created"},
        500: {"description": "Some server error"},
    },
)
async def create_movie(
    fields: Dict[str, Any] = Body(..., examples=[MOVIE_EXAMPLE]),
    service: RecordService = Depends(get_movie_service),
) -> Dict[str, Any]:
    return await service.create_record(fields)


@router.get(
    "",
    response_model=None,
    summary="Lấy danh sách tất cả phim",
    responses={200: {"model": List[Movie], "description": "The list of the movies"}},
)
async def list_movies(service: RecordService = Depends(get_movie_service)) -> List[Dict[str, Any]]:
    return await service.list_records()


@router.get(
    "/{movie_id}",
    response_model=None,
    summary="Lấy thông tin chi tiết bộ phim theo id",
    responses={
        200: {"model": Movie, "description": "The movies description by id"},
        404: {"description": "The movies was not found"},
    },
)
async def get_movie(movie_id: str, service: RecordService = Depends(get_movie_service)) -> Dict[str, Any]:
    try:
        return await service.get_record(movie_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found") from e


@router.put(
    "/{movie_id}",
    response_model=None,
    summary="Cập nhật phim theo id",
    responses={
        200: {"model": Movie, "description": "Bộ phim đã được cập nhật"},
        500: {"description": "Some error happened"},
    },
)
async def update_movie(
    movie_id: str,
    fields: Dict[str, Any] = Body(..., examples=[{"evaluate": "4"}]),
    service: RecordService = Depends(get_movie_service),
):
    """Merge the body into the stored movie; unknown ids give an empty 200."""
    movie = await service.update_record(movie_id, fields)
    if movie is None:
        return Response(status_code=status.HTTP_200_OK)
    return movie


@router.delete(
    "/{movie_id}",
    response_model=None,
    summary="Xoá phim",
    responses={200: {"description": "The movie was deleted"}},
)
async def delete_movie(movie_id: str, service: RecordService = Depends(get_movie_service)) -> Response:
    await service.delete_record(movie_id)
    return Response(status_code=status.HTTP_200_OK)
