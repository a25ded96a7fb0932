"""
Customer endpoints for API v1.

Reading customers is public, writes need an authenticated user and
deletion an administrator.
"""

from typing import List

from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status
from pymongo.database import Database

from vidly_api.app.core.db import get_database, valid_object_id
from vidly_api.app.core.security import get_current_user, require_admin
from vidly_api.app.schemas.customer import CustomerCreate, CustomerRead
from vidly_api.app.services.customer_service import CustomerService

router = APIRouter()

NOT_FOUND = "The customer with the given ID was not found."


@router.get("/", response_model=List[CustomerRead])
async def list_customers(db: Database = Depends(get_database)) -> List[CustomerRead]:
    return await CustomerService.list_customers(db)


@router.get("/{id}", response_model=CustomerRead)
async def get_customer(
    customer_id: ObjectId = Depends(valid_object_id),
    db: Database = Depends(get_database),
) -> CustomerRead:
    customer = await CustomerService.get_customer(db, customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return customer


@router.post("/", response_model=CustomerRead)
async def create_customer(
    customer_in: CustomerCreate,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> CustomerRead:
    return await CustomerService.create_customer(db, customer_in)


@router.put("/{id}", response_model=CustomerRead)
async def update_customer(
    customer_in: CustomerCreate,
    customer_id: ObjectId = Depends(valid_object_id),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_database),
) -> CustomerRead:
    customer = await CustomerService.update_customer(db, customer_id, customer_in)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return customer


@router.delete("/{id}", response_model=CustomerRead)
async def delete_customer(
    customer_id: ObjectId = Depends(valid_object_id),
    current_user: dict = Depends(require_admin),
    db: Database = Depends(get_database),
) -> CustomerRead:
    customer = await CustomerService.delete_customer(db, customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return customer
