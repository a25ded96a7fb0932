"""
Rental endpoints for API v1.

All rental routes require an authenticated user.  ``POST /`` checks a
movie out; returns are handled by the ``returns`` router.
"""

from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from vidly_api.app.core.db import get_database, valid_object_id
from vidly_api.app.core.errors import ValidationFailedError
from vidly_api.app.core.security import get_current_user
from vidly_api.app.schemas.rental import RentalCreate, RentalRead
from vidly_api.app.services.rental_service import RentalService

router = APIRouter()


@router.get("/", response_model=List[RentalRead])
async def list_rentals(
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> List[RentalRead]:
    """Return all rentals, newest checkout first."""
    return await RentalService.list_rentals(db)


@router.get("/{id}", response_model=RentalRead)
async def get_rental(
    rental_id: ObjectId = Depends(valid_object_id),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> RentalRead:
    rental = await RentalService.get_rental(db, rental_id)
    if rental is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="The rental with the given ID was not found.")
    return rental


@router.post("/", response_model=RentalRead)
async def create_rental(
    rental_in: RentalCreate,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> RentalRead:
    """Check a movie out to a customer.

    Returns HTTP 400 if the customer or movie is unknown or the movie
    is out of stock.
    """
    try:
        return await RentalService.create_rental(db, rental_in)
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
