"""
Service layer for movies.

Each movie embeds a ``{_id, name}`` copy of its genre.  The copy is
refreshed whenever the movie itself is written, never when the genre
changes.  ``numberInStock`` is additionally adjusted by checkouts and
returns through ``$inc`` updates.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from vidly_api.app.core.db import stringify_ids
from vidly_api.app.core.errors import ValidationFailedError
from vidly_api.app.schemas.movie import MovieCreate, MovieRead

logger = logging.getLogger(__name__)


class MovieService:
    """CRUD operations on the ``movies`` collection."""

    @classmethod
    async def list_movies(cls, db: Database) -> List[MovieRead]:
        return [cls._to_read(doc) for doc in db["movies"].find().sort("title", ASCENDING)]

    @classmethod
    async def get_movie(cls, db: Database, movie_id: ObjectId) -> Optional[MovieRead]:
        doc = db["movies"].find_one({"_id": movie_id})
        return cls._to_read(doc) if doc else None

    @classmethod
    async def create_movie(cls, db: Database, data: MovieCreate) -> MovieRead:
        """Insert a movie.

        Raises ``ValidationFailedError`` if ``genreId`` does not name an
        existing genre.
        """
        doc = cls._build_document(db, data)
        result = db["movies"].insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Created movie %s (%s)", result.inserted_id, data.title)
        return cls._to_read(doc)

    @classmethod
    async def update_movie(cls, db: Database, movie_id: ObjectId, data: MovieCreate) -> Optional[MovieRead]:
        """Replace a movie's fields; returns ``None`` if the movie does not exist."""
        fields = cls._build_document(db, data)
        doc = db["movies"].find_one_and_update(
            {"_id": movie_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        logger.info("Updated movie %s", movie_id)
        return cls._to_read(doc)

    @classmethod
    async def delete_movie(cls, db: Database, movie_id: ObjectId) -> Optional[MovieRead]:
        doc = db["movies"].find_one_and_delete({"_id": movie_id})
        if doc is None:
            return None
        logger.info("Deleted movie %s", movie_id)
        return cls._to_read(doc)

    @staticmethod
    def _build_document(db: Database, data: MovieCreate) -> Dict[str, Any]:
        genre = db["genres"].find_one({"_id": ObjectId(data.genreId)})
        if genre is None:
            raise ValidationFailedError("Invalid genre.")
        return {
            "title": data.title,
            "genre": {"_id": genre["_id"], "name": genre["name"]},
            "numberInStock": data.numberInStock,
            "dailyRentalRate": data.dailyRentalRate,
        }

    @staticmethod
    def _to_read(doc: dict) -> MovieRead:
        return MovieRead(**stringify_ids(doc))
