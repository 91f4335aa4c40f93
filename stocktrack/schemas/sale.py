from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from stocktrack.schemas.product import ProductRef


class SaleItemCreate(BaseModel):
    product_id: Union[int, str, None] = Field(
        default=None,
        validation_alias=AliasChoices("productId", "product_id"),
    )
    quantity: Any = None


class SaleCreate(BaseModel):
    channel: str = ""
    items: Optional[List[SaleItemCreate]] = None
    date: Union[datetime, str, None] = None


class SaleItemRead(BaseModel):
    product_id: int = Field(serialization_alias="productId")
    quantity: int
    product: Optional[ProductRef] = None


class SaleRead(BaseModel):
    id: int
    channel: str
    date: datetime
    items: List[SaleItemRead] = Field(default_factory=list)


class ChannelSummary(BaseModel):
    channel: str
    total_quantity: int = Field(serialization_alias="totalQuantity")
    total_orders: int = Field(serialization_alias="totalOrders")


class OverallSummary(BaseModel):
    total_orders: int = Field(default=0, serialization_alias="totalOrders")
    total_quantity: int = Field(default=0, serialization_alias="totalQuantity")


class DailySummary(BaseModel):
    date: str
    channels: List[ChannelSummary] = Field(default_factory=list)
    overall: OverallSummary = Field(default_factory=OverallSummary)


class ExportResponse(BaseModel):
    message: str
    file_path: str = Field(serialization_alias="filePath")
