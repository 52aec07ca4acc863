"""
Top-level router for version 1 of the API.

Aggregates the resource routers.  Tags match the groups used by the
published API documentation.
"""

from fastapi import APIRouter

from .endpoints import books, movies, theaters, users

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["Books"])
router.include_router(users.router, prefix="/users", tags=["QuanLyNguoiDung"])
router.include_router(movies.router, prefix="/movies", tags=["QuanLyPhim"])
router.include_router(theaters.system_router, prefix="/system-theater", tags=["QuanLyRap"])
router.include_router(theaters.group_router, prefix="/group-theater", tags=["QuanLyRap"])
