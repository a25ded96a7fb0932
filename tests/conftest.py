"""Shared pytest fixtures for the Vidly API tests."""

import os

# Settings are read at import time, so the environment must be prepared
# before anything from vidly_api is imported.
os.environ.setdefault("JWT_PRIVATE_KEY", "test-private-key")
os.environ.setdefault("DATABASE_NAME", "vidly_tests")

from datetime import timedelta
from typing import Any, Dict, Optional

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from vidly_api.app.core import db as db_module
from vidly_api.app.core.security import generate_auth_token
from vidly_api.app.main import app


@pytest.fixture
def mongo_client(monkeypatch: pytest.MonkeyPatch) -> mongomock.MongoClient:
    """In-memory MongoDB client installed as the application's client."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(db_module, "_client", client)
    return client


@pytest.fixture
def db(mongo_client):
    """The application database, backed by mongomock."""
    return db_module.get_database()


@pytest.fixture
def client(db):
    """HTTP test client with startup/shutdown hooks executed."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token() -> str:
    """Auth token of a regular (non-admin) user."""
    return generate_auth_token({"_id": ObjectId(), "isAdmin": False})


@pytest.fixture
def admin_token() -> str:
    return generate_auth_token({"_id": ObjectId(), "isAdmin": True})


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def auth(token: Optional[str]) -> Dict[str, str]:
    """Headers carrying ``token`` (empty dict for no token)."""
    return {"x-auth-token": token} if token else {}


def insert_genre(db, name: str = "genre1") -> Dict[str, Any]:
    doc = {"name": name}
    doc["_id"] = db["genres"].insert_one(doc).inserted_id
    return doc


def insert_customer(db, name: str = "12345", phone: str = "12345", is_gold: bool = False) -> Dict[str, Any]:
    doc = {"name": name, "phone": phone, "isGold": is_gold}
    doc["_id"] = db["customers"].insert_one(doc).inserted_id
    return doc


def insert_movie(
    db,
    title: str = "12345",
    genre: Optional[Dict[str, Any]] = None,
    number_in_stock: int = 1,
    daily_rental_rate: float = 2,
) -> Dict[str, Any]:
    genre = genre or {"_id": ObjectId(), "name": "12345"}
    doc = {
        "title": title,
        "genre": {"_id": genre["_id"], "name": genre["name"]},
        "numberInStock": number_in_stock,
        "dailyRentalRate": daily_rental_rate,
    }
    doc["_id"] = db["movies"].insert_one(doc).inserted_id
    return doc


def insert_rental(
    db,
    customer_id: ObjectId,
    movie_id: ObjectId,
    days_out: float = 0,
    daily_rental_rate: float = 2,
    returned: bool = False,
) -> Dict[str, Any]:
    now = db_module.utcnow()
    doc = {
        "customer": {"_id": customer_id, "name": "12345", "phone": "12345"},
        "movie": {"_id": movie_id, "title": "12345", "dailyRentalRate": daily_rental_rate},
        "dateOut": now - timedelta(days=days_out),
        "dateReturned": now if returned else None,
        "rentalFee": None,
    }
    doc["_id"] = db["rentals"].insert_one(doc).inserted_id
    return doc
