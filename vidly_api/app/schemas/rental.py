"""
Pydantic schemas for rentals and returns.

A rental embeds value copies of the customer and the movie taken at
checkout.  ``dateReturned`` and ``rentalFee`` stay ``None`` until the
rental is settled through the returns endpoint.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from .common import DocumentRead, ObjectIdStr


class RentalCreate(BaseModel):
    """Checkout request: which customer rents which movie."""

    customerId: ObjectIdStr
    movieId: ObjectIdStr


class ReturnCreate(BaseModel):
    """Return request identifying the open rental by its business key."""

    customerId: ObjectIdStr
    movieId: ObjectIdStr


class CustomerSnapshot(DocumentRead):
    name: str
    phone: str


class MovieSnapshot(DocumentRead):
    title: str
    dailyRentalRate: float


class RentalRead(DocumentRead):
    """Schema for reading a rental."""

    customer: CustomerSnapshot
    movie: MovieSnapshot
    dateOut: datetime
    dateReturned: Optional[datetime] = None
    rentalFee: Optional[float] = None
