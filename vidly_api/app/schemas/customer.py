"""Pydantic schemas for customers."""

from pydantic import BaseModel, Field

from .common import DocumentRead


class CustomerCreate(BaseModel):
    """Schema for creating or replacing a customer."""

    name: str = Field(..., min_length=5, max_length=50, examples=["Jane Doe"])
    phone: str = Field(..., min_length=5, max_length=50, examples=["555-0100"])
    isGold: bool = Field(False, description="Gold customers get priority service")


class CustomerRead(DocumentRead):
    name: str
    phone: str
    isGold: bool = False
