"""
User endpoints for API v1.

``POST /`` registers a user and hands back an auth token in the
``x-auth-token`` response header so clients are logged in right away.
``GET /me`` returns the caller's own record.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pymongo.database import Database

from vidly_api.app.core.db import get_database, parse_object_id
from vidly_api.app.core.errors import ValidationFailedError
from vidly_api.app.core.security import TOKEN_HEADER, generate_auth_token, get_current_user
from vidly_api.app.schemas.user import UserCreate, UserRead
from vidly_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/me", response_model=UserRead)
async def read_current_user(
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> UserRead:
    user_id = parse_object_id(current_user.get("_id"))
    user = await UserService.get_user(db, user_id) if user_id else None
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return user


@router.post("/", response_model=UserRead)
async def register_user(
    user_in: UserCreate,
    response: Response,
    db: Database = Depends(get_database),
) -> UserRead:
    """Register a new user.  Returns 400 if the e-mail is already taken."""
    try:
        doc = await UserService.create_user(db, user_in)
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    response.headers[TOKEN_HEADER] = generate_auth_token(doc)
    return UserService.to_read(doc)
