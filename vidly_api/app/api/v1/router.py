"""
Top-level router for version 1 of the API.

Aggregates the domain routers.  When a new domain is introduced,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import auth, customers, genres, movies, rentals, returns, users

router = APIRouter()

router.include_router(genres.router, prefix="/genres", tags=["genres"])
router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(rentals.router, prefix="/rentals", tags=["rentals"])
router.include_router(returns.router, prefix="/returns", tags=["returns"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
