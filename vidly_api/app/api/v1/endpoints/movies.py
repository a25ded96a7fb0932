"""
Movie endpoints for API v1.

Movies reference their genre by ``genreId`` on input; an unknown genre
is rejected with HTTP 400.
"""

from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from vidly_api.app.core.db import get_database, valid_object_id
from vidly_api.app.core.errors import ValidationFailedError
from vidly_api.app.core.security import get_current_user, require_admin
from vidly_api.app.schemas.movie import MovieCreate, MovieRead
from vidly_api.app.services.movie_service import MovieService

router = APIRouter()

NOT_FOUND = "The movie with the given ID was not found."


@router.get("/", response_model=List[MovieRead])
async def list_movies(db: Database = Depends(get_database)) -> List[MovieRead]:
    """Return all movies ordered by title."""
    return await MovieService.list_movies(db)


@router.get("/{id}", response_model=MovieRead)
async def get_movie(
    movie_id: ObjectId = Depends(valid_object_id),
    db: Database = Depends(get_database),
) -> MovieRead:
    movie = await MovieService.get_movie(db, movie_id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return movie


@router.post("/", response_model=MovieRead)
async def create_movie(
    movie_in: MovieCreate,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> MovieRead:
    try:
        return await MovieService.create_movie(db, movie_in)
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


@router.put("/{id}", response_model=MovieRead)
async def update_movie(
    movie_in: MovieCreate,
    movie_id: ObjectId = Depends(valid_object_id),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> MovieRead:
    try:
        movie = await MovieService.update_movie(db, movie_id, movie_in)
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return movie


@router.delete("/{id}", response_model=MovieRead)
async def delete_movie(
    movie_id: ObjectId = Depends(valid_object_id),
    current_user: dict = Depends(require_admin),
    db: Database = Depends(get_database),
) -> MovieRead:
    """Delete a movie (admin only).  Existing rentals keep their snapshot."""
    movie = await MovieService.delete_movie(db, movie_id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return movie
