"""Service layer for customers."""

import logging
from typing import List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from vidly_api.app.core.db import stringify_ids
from vidly_api.app.schemas.customer import CustomerCreate, CustomerRead

logger = logging.getLogger(__name__)


class CustomerService:
    """CRUD operations on the ``customers`` collection.

    Rentals keep their own copy of the customer's name and phone, so
    edits here only affect future rentals.
    """

    @classmethod
    async def list_customers(cls, db: Database) -> List[CustomerRead]:
        return [cls._to_read(doc) for doc in db["customers"].find().sort("name", ASCENDING)]

    @classmethod
    async def get_customer(cls, db: Database, customer_id: ObjectId) -> Optional[CustomerRead]:
        doc = db["customers"].find_one({"_id": customer_id})
        return cls._to_read(doc) if doc else None

    @classmethod
    async def create_customer(cls, db: Database, data: CustomerCreate) -> CustomerRead:
        doc = data.model_dump()
        result = db["customers"].insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Created customer %s", result.inserted_id)
        return cls._to_read(doc)

    @classmethod
    async def update_customer(
        cls, db: Database, customer_id: ObjectId, data: CustomerCreate
    ) -> Optional[CustomerRead]:
        doc = db["customers"].find_one_and_update(
            {"_id": customer_id},
            {"$set": data.model_dump()},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        logger.info("Updated customer %s", customer_id)
        return cls._to_read(doc)

    @classmethod
    async def delete_customer(cls, db: Database, customer_id: ObjectId) -> Optional[CustomerRead]:
        doc = db["customers"].find_one_and_delete({"_id": customer_id})
        if doc is None:
            return None
        logger.info("Deleted customer %s", customer_id)
        return cls._to_read(doc)

    @staticmethod
    def _to_read(doc: dict) -> CustomerRead:
        return CustomerRead(**stringify_ids(doc))
