from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String

from stocktrack.database.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)

    name = Column(String, nullable=False, default="")
    sku = Column(String, nullable=False, default="")
    quantity = Column(Integer, nullable=False, default=0)
    location = Column(String, nullable=False, default="")
    supplier = Column(String, nullable=False, default="")

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_products_sku", "sku"),
    )


__all__ = ["Product"]
