"""
Service layer for genres.

Genres are a flat collection of names.  Renaming a genre does not
touch movies that already embed it; their snapshot keeps the old
name.
"""

import logging
from typing import List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from vidly_api.app.core.db import stringify_ids
from vidly_api.app.schemas.genre import GenreCreate, GenreRead

logger = logging.getLogger(__name__)


class GenreService:
    """CRUD operations on the ``genres`` collection."""

    @classmethod
    async def list_genres(cls, db: Database) -> List[GenreRead]:
        return [cls._to_read(doc) for doc in db["genres"].find().sort("name", ASCENDING)]

    @classmethod
    async def get_genre(cls, db: Database, genre_id: ObjectId) -> Optional[GenreRead]:
        doc = db["genres"].find_one({"_id": genre_id})
        return cls._to_read(doc) if doc else None

    @classmethod
    async def create_genre(cls, db: Database, data: GenreCreate) -> GenreRead:
        doc = {"name": data.name}
        result = db["genres"].insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Created genre %s (%s)", result.inserted_id, data.name)
        return cls._to_read(doc)

    @classmethod
    async def update_genre(cls, db: Database, genre_id: ObjectId, data: GenreCreate) -> Optional[GenreRead]:
        """Rename a genre; returns ``None`` when it does not exist."""
        doc = db["genres"].find_one_and_update(
            {"_id": genre_id},
            {"$set": {"name": data.name}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        logger.info("Updated genre %s", genre_id)
        return cls._to_read(doc)

    @classmethod
    async def delete_genre(cls, db: Database, genre_id: ObjectId) -> Optional[GenreRead]:
        """Delete a genre and return it as it was."""
        doc = db["genres"].find_one_and_delete({"_id": genre_id})
        if doc is None:
            return None
        logger.info("Deleted genre %s", genre_id)
        return cls._to_read(doc)

    @staticmethod
    def _to_read(doc: dict) -> GenreRead:
        return GenreRead(**stringify_ids(doc))
