"""Schema describing a movie record."""

from typing import Optional

from pydantic import BaseModel, Field


MOVIE_EXAMPLE = {
    "name": "hồi chuông lạ",
    "trailer": "https://www.youtube.com/watch?v=u34gHaRiBIU",
    "poster": "poster",
    "description": (
        "Hồi Chuông Lạ - From lấy bối cảnh tại một thị trấn u ám, hoang văng "
        "ở miền trung nước Mỹ."
    ),
    "startTime": "2022-02-04 00:00:00",
    "evaluate": "5",
}


class Movie(BaseModel):
    id: Optional[str] = Field(None, description="The auto-generated id of the movie")
    name: Optional[str] = Field(None, description="Tên phim")
    trailer: Optional[str] = Field(None, description="Link trailer phim")
    poster: Optional[str] = Field(None, description="Link poster phim")
    description: Optional[str] = Field(None, description="Tiêu đề phim")
    startTime: Optional[str] = Field(None, description="Thời gian bắt đầu phim")
    evaluate: Optional[str] = Field(None, description="Đánh giá phim")

    model_config = {
        "extra": "allow",
        "json_schema_extra": {"example": MOVIE_EXAMPLE},
    }
