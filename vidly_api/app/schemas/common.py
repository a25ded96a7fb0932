"""Shared schema building blocks."""

from typing import Annotated

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _check_object_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise ValueError("must be a valid id")
    return value


# A 24-hex string that can be converted to a BSON ObjectId.
ObjectIdStr = Annotated[str, AfterValidator(_check_object_id)]


class DocumentRead(BaseModel):
    """Base for response models of stored documents."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
