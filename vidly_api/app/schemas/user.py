"""
Pydantic models for users and authentication.

Passwords are accepted on input only; ``UserRead`` never includes
them.  ``isAdmin`` cannot be set through registration and is managed
directly in the database.
"""

from pydantic import BaseModel, EmailStr, Field

from .common import DocumentRead


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str = Field(..., min_length=5, max_length=50, examples=["Jane Doe"])
    email: EmailStr = Field(..., examples=["jane@vidly.io"])
    password: str = Field(..., min_length=5, max_length=255)


class UserRead(DocumentRead):
    """Schema for reading a user from the API."""

    name: str
    email: str
    isAdmin: bool = False


class AuthRequest(BaseModel):
    """Login credentials."""

    email: EmailStr
    password: str = Field(..., min_length=5, max_length=255)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
