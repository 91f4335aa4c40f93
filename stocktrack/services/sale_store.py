from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from stocktrack.models.product import Product
from stocktrack.models.sales import Sale, SaleItem
from stocktrack.services.product_store import ProductStore


class SaleStore:
    def __init__(self, db: Session):
        self.db = db

    def create_sale(
        self,
        channel: str,
        items: Iterable[tuple[int, int]],
        date: Optional[datetime] = None,
    ) -> Sale:
        sale = Sale(channel=channel, date=date or datetime.now())
        for position, (product_id, quantity) in enumerate(items):
            sale.items.append(
                SaleItem(position=position, product_id=product_id, quantity=quantity)
            )
        self.db.add(sale)
        self.db.commit()
        self.db.refresh(sale)
        return sale

    def list_by_channel(
        self,
        channel: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Sale]:
        stmt = select(Sale).where(Sale.channel == channel)
        if start is not None:
            stmt = stmt.where(Sale.date >= start)
        if end is not None:
            stmt = stmt.where(Sale.date <= end)
        stmt = stmt.order_by(Sale.date.desc(), Sale.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def list_all(self) -> list[Sale]:
        return list(self.db.execute(select(Sale).order_by(Sale.id)).scalars().all())

    def referenced_products(self, sales: Iterable[Sale]) -> dict[int, Product]:
        product_ids = {item.product_id for sale in sales for item in sale.items}
        return ProductStore(self.db).get_many(product_ids)


def serialize_sale(sale: Sale, products: dict[int, Product]) -> dict:
    """Expand each line item with the referenced product's name and SKU."""
    items = []
    for item in sale.items:
        product = products.get(item.product_id)
        items.append(
            {
                "product_id": item.product_id,
                "quantity": item.quantity,
                "product": (
                    {"id": product.id, "name": product.name, "sku": product.sku}
                    if product is not None
                    else None
                ),
            }
        )
    return {
        "id": sale.id,
        "channel": sale.channel,
        "date": sale.date,
        "items": items,
    }


__all__ = ["SaleStore", "serialize_sale"]
