"""
Genre endpoints for API v1.

Listing and reading genres is public.  Any authenticated user may
create or rename a genre; deleting one requires an administrator.
"""

from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from vidly_api.app.core.db import get_database, valid_object_id
from vidly_api.app.core.security import get_current_user, require_admin
from vidly_api.app.schemas.genre import GenreCreate, GenreRead
from vidly_api.app.services.genre_service import GenreService

router = APIRouter()


@router.get("/", response_model=List[GenreRead])
async def list_genres(db: Database = Depends(get_database)) -> List[GenreRead]:
    """Return all genres ordered by name."""
    return await GenreService.list_genres(db)


@router.get("/{id}", response_model=GenreRead)
async def get_genre(
    genre_id: ObjectId = Depends(valid_object_id),
    db: Database = Depends(get_database),
) -> GenreRead:
    genre = await GenreService.get_genre(db, genre_id)
    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="The genre with the given ID was not found.")
    return genre


@router.post("/", response_model=GenreRead)
async def create_genre(
    genre_in: GenreCreate,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> GenreRead:
    return await GenreService.create_genre(db, genre_in)


@router.put("/{id}", response_model=GenreRead)
async def update_genre(
    genre_in: GenreCreate,
    genre_id: ObjectId = Depends(valid_object_id),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> GenreRead:
    genre = await GenreService.update_genre(db, genre_id, genre_in)
    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="The genre with the given ID was not found.")
    return genre


@router.delete("/{id}", response_model=GenreRead)
async def delete_genre(
    genre_id: ObjectId = Depends(valid_object_id),
    current_user: dict = Depends(require_admin),
    db: Database = Depends(get_database),
) -> GenreRead:
    """Delete a genre (admin only) and return the deleted record."""
    genre = await GenreService.delete_genre(db, genre_id)
    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="The genre with the given ID was not found.")
    return genre
