"""
Schema describing a user record.

Users are stored exactly as submitted, password included.  Nothing here
hashes or hides it; authentication is outside the scope of this API.
"""

from typing import Optional

from pydantic import BaseModel, Field


USER_EXAMPLE = {
    "firstName": "zzzzz",
    "lastName": "Nguyễn",
    "email": "hoa@ncc.asia",
    "password": "12345678",
    "birthday": "2022-02-04 00:00:00",
    "phoneNumber": "09090909090",
}


class User(BaseModel):
    id: Optional[str] = Field(None, description="The auto-generated id of the user")
    firstName: Optional[str] = Field(None, description="Tên đầu của người dùng")
    lastName: Optional[str] = Field(None, description="Tên cuối của người dùng")
    email: Optional[str] = Field(None, description="Email người dùng")
    password: Optional[str] = Field(None, description="Mật khẩu người dùng")
    birthday: Optional[str] = Field(None, description="Ngày sinh người dùng")
    phoneNumber: Optional[str] = Field(None, description="Số điện thoại người dùng")

    model_config = {
        "extra": "allow",
        "json_schema_extra": {"example": USER_EXAMPLE},
    }
