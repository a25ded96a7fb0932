"""
Store interfaces used by rental settlement.

The settlement logic never touches a database handle directly; it is
given a ``RentalStore`` and an ``InventoryStore``.  The MongoDB
implementations below wrap a pymongo ``Database``; tests substitute
their own objects with the same methods.
"""

import logging
from typing import Any, Dict, Optional, Protocol

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from .errors import AlreadyProcessedError, StoreFailure

logger = logging.getLogger(__name__)


class RentalStore(Protocol):
    def find_rental(self, customer_id: ObjectId, movie_id: ObjectId) -> Optional[Dict[str, Any]]:
        ...

    def save_rental(self, rental: Dict[str, Any]) -> None:
        ...


class InventoryStore(Protocol):
    def increment_stock(self, movie_id: ObjectId, delta: int) -> None:
        ...


class MongoRentalStore:
    """Rentals collection access for settlement."""

    def __init__(self, db: Database) -> None:
        self.collection = db["rentals"]

    def find_rental(self, customer_id: ObjectId, movie_id: ObjectId) -> Optional[Dict[str, Any]]:
        """Return the rental for the pair, preferring an open one.

        When every rental for the pair is closed the most recent one is
        returned so the caller can report it as already processed.
        """
        key = {"customer._id": customer_id, "movie._id": movie_id}
        rental = self.collection.find_one(
            {**key, "dateReturned": None},
            sort=[("dateOut", DESCENDING)],
        )
        if rental is None:
            rental = self.collection.find_one(key, sort=[("dateOut", DESCENDING)])
        return rental

    def save_rental(self, rental: Dict[str, Any]) -> None:
        """Persist the settlement fields of a still-open rental.

        Raises ``AlreadyProcessedError`` when the rental was closed since
        it was read.
        """
        result = self.collection.update_one(
            {"_id": rental["_id"], "dateReturned": None},
            {"$set": {"dateReturned": rental["dateReturned"], "rentalFee": rental["rentalFee"]}},
        )
        if result.matched_count == 1:
            return
        if self.collection.find_one({"_id": rental["_id"]}, {"_id": 1}) is not None:
            raise AlreadyProcessedError("Return already processed.")
        raise StoreFailure(f"Rental {rental['_id']} disappeared before it could be saved")


class MongoInventoryStore:
    """Stock counters on the movies collection."""

    def __init__(self, db: Database) -> None:
        self.collection = db["movies"]

    def increment_stock(self, movie_id: ObjectId, delta: int) -> None:
        result = self.collection.update_one({"_id": movie_id}, {"$inc": {"numberInStock": delta}})
        if result.matched_count != 1:
            # The rental carries a snapshot, so the movie itself may be gone.
            logger.warning("Movie %s not found while adjusting stock by %s", movie_id, delta)
