from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from stocktrack.database.base import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    channel = Column(String, nullable=False, default="")
    # naive local time; daily summaries bucket on the local calendar day
    date = Column(DateTime, nullable=False, default=datetime.now)

    items = relationship(
        "SaleItem",
        back_populates="sale",
        order_by="SaleItem.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_sales_channel_date", "channel", "date"),
        Index("idx_sales_date", "date"),
    )


class SaleItem(Base):
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True)
    sale_id = Column(Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    # weak reference: products may be deleted while their sales remain
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)

    sale = relationship("Sale", back_populates="items")

    __table_args__ = (
        Index("idx_sale_items_sale", "sale_id"),
        Index("idx_sale_items_product", "product_id"),
    )


__all__ = ["Sale", "SaleItem"]
