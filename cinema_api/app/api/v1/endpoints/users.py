"""
User endpoints (QuanLyNguoiDung).

Users are an ordinary record collection: sign-up stores the submitted
object as is (password in clear, no uniqueness check on e-mail) and
the listing returns everything.  The ``current``, ``pageSize`` and
``search`` query parameters some clients send are ignored.

Sign-in and account history need authentication, which this API does
not provide, so those routes are not exposed.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

from cinema_api.app.schemas.user import USER_EXAMPLE, User
from cinema_api.app.services.dependencies import get_user_service
from cinema_api.app.services.record_service import RecordNotFoundError, RecordService


router = APIRouter()


@router.get(
    "",
    response_model=None,
    summary="Lấy danh sách người dùng",
    responses={200: {"model": List[User], "description": "The list of the users"}},
)
async def list_users(service: RecordService = Depends(get_user_service)) -> List[Dict[str, Any]]:
    return await service.list_records()


@router.get(
    "/detail",
    response_model=None,
    summary="Lấy thông tin chi tiết người dùng",
    responses={
        200: {"model": User, "description": "get info user success"},
        404: {"description": "The user was not found"},
    },
)
async def get_user(
    id: Optional[str] = Query(None, description="id user"),
    service: RecordService = Depends(get_user_service),
) -> Dict[str, Any]:
    """Return one user, looked up by the ``id`` query parameter."""
    if id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    try:
        return await service.get_record(id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found") from e


@router.post(
    "/sign-up",
    response_model=None,
    summary="Thêm người dùng",
    responses={
        200: {"model": User, "description": "The users was successfully created"},
        500: {"description": "Some server error"},
    },
)
async def sign_up(
    fields: Dict[str, Any] = Body(..., examples=[USER_EXAMPLE]),
    service: RecordService = Depends(get_user_service),
) -> Dict[str, Any]:
    return await service.create_record(fields)


@router.put(
    "/{user_id}",
    response_model=None,
    summary="Cập nhật người dùng",
    responses={
        200: {"model": User, "description": "The users was successfully update"},
        500: {"description": "Some server error"},
    },
)
async def update_user(
    user_id: str,
    fields: Dict[str, Any] = Body(..., examples=[{"phoneNumber": "0912345678"}]),
    service: RecordService = Depends(get_user_service),
):
    user = await service.update_record(user_id, fields)
    if user is None:
        return Response(status_code=status.HTTP_200_OK)
    return user


@router.delete(
    "/{user_id}",
    response_model=None,
    summary="Xoá người dùng",
    responses={200: {"description": "The user was deleted"}},
)
async def delete_user(user_id: str, service: RecordService = Depends(get_user_service)) -> Response:
    await service.delete_record(user_id)
    return Response(status_code=status.HTTP_200_OK)
