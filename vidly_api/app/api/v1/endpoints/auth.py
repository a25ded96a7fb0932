"""Login endpoint for API v1."""

from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from vidly_api.app.core.db import get_database
from vidly_api.app.core.security import generate_auth_token
from vidly_api.app.schemas.user import AuthRequest, Token
from vidly_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/", response_model=Token)
async def login(credentials: AuthRequest, db: Database = Depends(get_database)) -> Token:
    """Exchange e-mail and password for an auth token.

    Unknown e-mail and wrong password produce the same 400 response.
    """
    user = await UserService.authenticate(db, credentials.email, credentials.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email or password.")
    return Token(access_token=generate_auth_token(user))
