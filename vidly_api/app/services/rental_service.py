"""
Service layer for rentals (checkout).

Creating a rental copies the customer's and the movie's relevant
fields into the rental document and takes one copy of the movie out of
stock.  The stock decrement and the rental insert are two separate
writes; the decrement goes first and is conditional on stock being
available, so concurrent checkouts can never drive ``numberInStock``
below zero.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from vidly_api.app.core.db import as_utc, stringify_ids, utcnow
from vidly_api.app.core.errors import ValidationFailedError
from vidly_api.app.schemas.rental import RentalCreate, RentalRead

logger = logging.getLogger(__name__)


def rental_to_read(doc: Dict[str, Any]) -> RentalRead:
    """Convert a stored rental document to its API representation."""
    data = stringify_ids(doc)
    data["dateOut"] = as_utc(data.get("dateOut"))
    data["dateReturned"] = as_utc(data.get("dateReturned"))
    return RentalRead(**data)


class RentalService:
    """Operations on the ``rentals`` collection."""

    @classmethod
    async def list_rentals(cls, db: Database) -> List[RentalRead]:
        """Return all rentals, most recent checkout first."""
        return [rental_to_read(doc) for doc in db["rentals"].find().sort("dateOut", DESCENDING)]

    @classmethod
    async def get_rental(cls, db: Database, rental_id: ObjectId) -> Optional[RentalRead]:
        doc = db["rentals"].find_one({"_id": rental_id})
        return rental_to_read(doc) if doc else None

    @classmethod
    async def create_rental(
        cls, db: Database, data: RentalCreate, now: Optional[datetime] = None
    ) -> RentalRead:
        """Check a movie out to a customer.

        Raises
        ------
        ValidationFailedError
            If the customer or movie does not exist, or the movie is
            out of stock.
        """
        customer = db["customers"].find_one({"_id": ObjectId(data.customerId)})
        if customer is None:
            raise ValidationFailedError("Invalid customer.")
        movie = db["movies"].find_one({"_id": ObjectId(data.movieId)})
        if movie is None:
            raise ValidationFailedError("Invalid movie.")
        if movie.get("numberInStock", 0) <= 0:
            raise ValidationFailedError("Movie not in stock.")

        result = db["movies"].update_one(
            {"_id": movie["_id"], "numberInStock": {"$gt": 0}},
            {"$inc": {"numberInStock": -1}},
        )
        if result.modified_count == 0:
            # Another checkout took the last copy between the read and the write.
            raise ValidationFailedError("Movie not in stock.")

        rental = {
            "customer": {
                "_id": customer["_id"],
                "name": customer["name"],
                "phone": customer["phone"],
            },
            "movie": {
                "_id": movie["_id"],
                "title": movie["title"],
                "dailyRentalRate": movie["dailyRentalRate"],
            },
            "dateOut": now or utcnow(),
            "dateReturned": None,
            "rentalFee": None,
        }
        rental["_id"] = db["rentals"].insert_one(rental).inserted_id
        logger.info(
            "Rental %s created: customer %s took movie %s",
            rental["_id"],
            customer["_id"],
            movie["_id"],
        )
        return rental_to_read(rental)
