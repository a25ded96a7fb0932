"""
MongoDB integration.

This module owns the process-wide ``MongoClient`` (``get_client``),
exposes the configured database as a FastAPI dependency
(``get_database``) and creates the indexes the services rely on at
application start (``init_db``).  ``MongoClient`` connects lazily, so
importing this module never touches the network.

Helpers for converting between the 24-hex string ids used on the wire
and BSON ``ObjectId`` values live here as well.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException, status
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from .config import settings

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None


def get_client() -> MongoClient:
    """Return the shared client, creating it on first use."""
    global _client
    if _client is None:
        logger.info("Connecting to MongoDB database %s", settings.database_name)
        _client = MongoClient(settings.database_url)
    return _client


def close_client() -> None:
    """Close the shared client if one was opened."""
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_database() -> Database:
    """FastAPI dependency returning the application database."""
    return get_client()[settings.database_name]


def init_db(db: Database) -> None:
    """Create indexes used by lookups and uniqueness checks."""
    db["users"].create_index([("email", ASCENDING)], unique=True)
    db["genres"].create_index([("name", ASCENDING)])
    db["customers"].create_index([("name", ASCENDING)])
    db["movies"].create_index([("title", ASCENDING)])
    # Settlement looks rentals up by the embedded customer/movie pair.
    db["rentals"].create_index(
        [("customer._id", ASCENDING), ("movie._id", ASCENDING), ("dateOut", DESCENDING)]
    )
    logger.info("Database indexes ensured")


# ---------------------------------------------------------------------------
# Identifier and timestamp helpers
# ---------------------------------------------------------------------------

def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Convert ``value`` to an ``ObjectId`` or return ``None`` when invalid."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def valid_object_id(id: str) -> ObjectId:
    """Path dependency: reject malformed ids with 404 like missing ones."""
    oid = parse_object_id(id)
    if oid is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invalid ID.")
    return oid


def utcnow() -> datetime:
    """Current UTC time as the naive datetime MongoDB round-trips."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes read back from the database."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def stringify_ids(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``doc`` with every ObjectId (also nested) as a string."""
    out: Dict[str, Any] = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
        elif isinstance(value, dict):
            out[key] = stringify_ids(value)
        else:
            out[key] = value
    return out
