"""
Theater endpoints (QuanLyRap).

Two routers live here: ``system_router`` for theater systems (chains
such as CGV or Cinestar) and ``group_router`` for theater groups, the
individual cinema complexes of a system.  Groups reference their
system through the ``maHeThongRap`` field.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from cinema_api.app.schemas.theater import (
    GROUP_THEATER_EXAMPLE,
    SYSTEM_THEATER_EXAMPLE,
    GroupTheater,
    SystemTheater,
)
from cinema_api.app.services.dependencies import (
    get_group_theater_service,
    get_system_theater_service,
)
from cinema_api.app.services.record_service import RecordService


system_router = APIRouter()
group_router = APIRouter()


@system_router.get(
    "",
    response_model=None,
    summary="Lấy danh sách hệ thống rạp",
    responses={200: {"model": List[SystemTheater], "description": "The list of the system theater"}},
)
async def list_system_theaters(
    service: RecordService = Depends(get_system_theater_service),
) -> List[Dict[str, Any]]:
    return await service.list_records()


@system_router.post(
    "/create-system-theater",
    response_model=None,
    summary="Thêm hệ thống rạp",
    responses={
        200: {"model": SystemTheater, "description": "The system theater was successfully created"},
        500: {"description": "Some server error"},
    },
)
async def create_system_theater(
    fields: Dict[str, Any] = Body(..., examples=[SYSTEM_THEATER_EXAMPLE]),
    service: RecordService = Depends(get_system_theater_service),
) -> Dict[str, Any]:
    return await service.create_record(fields)


@group_router.get(
    "",
    response_model=None,
    summary="Lấy tất cả cụm rạp theo hệ thống",
    responses={200: {"model": List[GroupTheater], "description": "The list of the group theater"}},
)
async def list_group_theaters(
    service: RecordService = Depends(get_group_theater_service),
) -> List[Dict[str, Any]]:
    return await service.list_records()


@group_router.post(
    "/create-group-theater",
    response_model=None,
    summary="Thêm cụm rạp",
    responses={
        200: {"model": GroupTheater, "description": "The group theater was successfully created"},
        500: {"description": "Some server error"},
    },
)
async def create_group_theater(
    fields: Dict[str, Any] = Body(..., examples=[GROUP_THEATER_EXAMPLE]),
    service: RecordService = Depends(get_group_theater_service),
) -> Dict[str, Any]:
    return await service.create_record(fields)


@group_router.get(
    "/{maHeThongRap}",
    response_model=None,
    summary="Lấy thông tin cụm rạp theo hệ thống",
    responses={200: {"model": List[GroupTheater], "description": "The groups of the theater system"}},
)
async def list_group_theaters_by_system(
    maHeThongRap: str,
    service: RecordService = Depends(get_group_theater_service),
) -> List[Dict[str, Any]]:
    """Return the groups whose ``maHeThongRap`` matches the path value.

    Stored codes are often numbers; they match their decimal text form.
    An unknown code yields an empty list rather than 404.
    """
    return await service.list_records_by("maHeThongRap", maHeThongRap)
