"""
Schemas for theater systems and theater groups.

A theater group belongs to a system through its ``maHeThongRap``
field.  The link is informational only: nothing checks that the system
exists, and deleting a system leaves its groups in place.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


SYSTEM_THEATER_EXAMPLE = {
    "tenHeThongRap": "Cinestar",
    "biDanh": "CNS",
    "logo": "http://movie0706.cybersoft.edu.vn/hinhanh/cgv.png",
}

GROUP_THEATER_EXAMPLE = {
    "codeGroupTheater": "BHD Bơ Bao",
    "nameGroupTheater": "BHD - Aeon Tân Phú",
    "location": "30 Bờ Bao Tân Thắng, Sơn Kỳ, Tân Phú",
    "maHeThongRap": 4,
}


class SystemTheater(BaseModel):
    id: Optional[str] = Field(None, description="The auto-generated id of the theater system")
    tenHeThongRap: Optional[str] = Field(None, description="Tên hệ thống rạp")
    biDanh: Optional[str] = Field(None, description="Bí danh hệ thống rạp")
    logo: Optional[str] = Field(None, description="Logo hệ thống rạp")

    model_config = {
        "extra": "allow",
        "json_schema_extra": {"example": SYSTEM_THEATER_EXAMPLE},
    }


class GroupTheater(BaseModel):
    id: Optional[str] = Field(None, description="The auto-generated id of the theater group")
    codeGroupTheater: Optional[str] = Field(None, description="Mã cụm rạp")
    nameGroupTheater: Optional[str] = Field(None, description="Tên cụm rạp")
    location: Optional[str] = Field(None, description="Vị trí")
    maHeThongRap: Optional[Union[int, str]] = Field(None, description="Mã hệ thống rạp")

    model_config = {
        "extra": "allow",
        "json_schema_extra": {"example": GROUP_THEATER_EXAMPLE},
    }
