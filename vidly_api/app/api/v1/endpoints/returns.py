"""
Return endpoint for API v1.

``POST /`` settles the open rental identified by ``customerId`` and
``movieId``.  The handler wires the MongoDB stores into
``ReturnService``; the settlement rules live in the service.
"""

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from vidly_api.app.core.db import get_database
from vidly_api.app.core.errors import AlreadyProcessedError, NotFoundError
from vidly_api.app.core.security import get_current_user
from vidly_api.app.core.stores import MongoInventoryStore, MongoRentalStore
from vidly_api.app.schemas.rental import RentalRead, ReturnCreate
from vidly_api.app.services.rental_service import rental_to_read
from vidly_api.app.services.return_service import ReturnService

router = APIRouter()


@router.post("/", response_model=RentalRead)
async def create_return(
    return_in: ReturnCreate,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> RentalRead:
    """Settle a return.

    * 404 if there is no rental for the customer/movie pair.
    * 400 if the rental was already returned.
    """
    try:
        rental = await ReturnService.settle_return(
            MongoRentalStore(db),
            MongoInventoryStore(db),
            ObjectId(return_in.customerId),
            ObjectId(return_in.movieId),
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except AlreadyProcessedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return rental_to_read(rental)
