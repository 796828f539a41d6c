from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, StrictFloat, field_validator


# --- Restaurant ---
class RestaurantBase(BaseModel):
    name: str
    address: str
    phone: str
    # ints are accepted, numeric strings and booleans are not
    rating: Optional[StrictFloat] = None


class RestaurantCreate(RestaurantBase):
    pass


class RestaurantUpdate(BaseModel):
    """
    Partial update. Only fields present in the request body are applied;
    a `name` key is accepted but ignored.
    """

    address: Optional[str] = None
    phone: Optional[str] = None
    rating: Optional[StrictFloat] = None

    @field_validator("address", "phone")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict:
        """Fields explicitly sent by the client, with their values."""
        return self.model_dump(exclude_unset=True)


class RestaurantResponse(RestaurantBase):
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class RestaurantListResponse(BaseModel):
    restaurants: List[RestaurantResponse] = []


# --- Errors ---
class ErrorResponse(BaseModel):
    error: str
