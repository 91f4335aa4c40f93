from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    name: str = ""
    sku: str = ""
    location: str = ""
    supplier: str = ""


class ProductCreate(ProductBase):
    quantity: Optional[int] = None


class ProductQuantityUpdate(BaseModel):
    quantity: int


class ProductRead(ProductBase):
    id: int
    quantity: int
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)


class ProductRef(BaseModel):
    id: int
    name: str
    sku: str

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
