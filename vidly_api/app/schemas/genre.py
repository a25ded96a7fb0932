"""
Pydantic schemas for genres.

Genres are also embedded in movies as a ``{_id, name}`` snapshot,
which is why ``GenreRead`` doubles as the snapshot model.
"""

from pydantic import BaseModel, Field

from .common import DocumentRead


class GenreCreate(BaseModel):
    """Schema for creating or renaming a genre."""

    name: str = Field(..., min_length=3, max_length=30, examples=["Comedy"])


class GenreRead(DocumentRead):
    """Schema for reading a genre."""

    name: str
