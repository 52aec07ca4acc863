"""Schema describing a book record."""

from typing import Optional

from pydantic import BaseModel, Field


BOOK_EXAMPLE = {
    "id": "d5fE_asz",
    "title": "The New Turing Omnibus",
    "author": "Alexander K. Dewdney",
}


class Book(BaseModel):
    id: Optional[str] = Field(None, description="The auto-generated id of the book")
    title: Optional[str] = Field(None, description="The book title")
    author: Optional[str] = Field(None, description="The book author")

    model_config = {
        "extra": "allow",
        "json_schema_extra": {"example": BOOK_EXAMPLE},
    }
