"""
Business logic for users.

Users register with a name, e-mail and password.  Passwords are
stored as PBKDF2 hashes (see ``core.security``).  Administrators are
ordinary users whose ``isAdmin`` flag was set directly in the
database.
"""

import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from vidly_api.app.core.db import stringify_ids
from vidly_api.app.core.errors import ValidationFailedError
from vidly_api.app.core.security import hash_password, verify_password
from vidly_api.app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Registration, lookup and authentication of users."""

    @classmethod
    async def create_user(cls, db: Database, data: UserCreate) -> Dict[str, Any]:
        """Register a user and return the stored document.

        Raises ``ValidationFailedError`` when the e-mail address is
        already taken.
        """
        if db["users"].find_one({"email": data.email}) is not None:
            raise ValidationFailedError("User already registered.")
        doc = {
            "name": data.name,
            "email": data.email,
            "password": hash_password(data.password),
            "isAdmin": False,
        }
        try:
            doc["_id"] = db["users"].insert_one(doc).inserted_id
        except DuplicateKeyError:
            # Lost a race against a concurrent registration.
            raise ValidationFailedError("User already registered.")
        logger.info("Registered user %s", doc["_id"])
        return doc

    @classmethod
    async def get_user(cls, db: Database, user_id: ObjectId) -> Optional[UserRead]:
        doc = db["users"].find_one({"_id": user_id}, {"password": 0})
        return cls.to_read(doc) if doc else None

    @classmethod
    async def authenticate(cls, db: Database, email: str, password: str) -> Optional[Dict[str, Any]]:
        """Return the user document if the credentials match, else ``None``."""
        doc = db["users"].find_one({"email": email})
        if doc is None or not verify_password(password, doc.get("password") or ""):
            logger.info("Failed login attempt for %s", email)
            return None
        return doc

    @staticmethod
    def to_read(doc: Dict[str, Any]) -> UserRead:
        data = stringify_ids(doc)
        data.pop("password", None)
        return UserRead(**data)
