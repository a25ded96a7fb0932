"""
Pydantic schemas for movies.

Clients reference the genre by id (``genreId``); the stored movie
embeds a copy of the genre as it was when the movie was saved.
"""

from pydantic import BaseModel, ConfigDict, Field

from .common import DocumentRead, ObjectIdStr
from .genre import GenreRead


class MovieCreate(BaseModel):
    """Schema for creating or replacing a movie."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=5, max_length=255, examples=["Terminator"])
    genreId: ObjectIdStr
    numberInStock: int = Field(..., ge=0, le=255)
    dailyRentalRate: float = Field(..., ge=0, le=255)


class MovieRead(DocumentRead):
    title: str
    genre: GenreRead
    numberInStock: int
    dailyRentalRate: float
