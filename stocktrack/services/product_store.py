from typing import Iterable, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from stocktrack.models.product import Product


class ProductStore:
    """Product records backed by a SQLAlchemy session.

    Writes commit immediately; each call is its own unit of work.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> list[Product]:
        return list(self.db.execute(select(Product).order_by(Product.id)).scalars().all())

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def get_many(self, product_ids: Iterable[int]) -> dict[int, Product]:
        ids = set(product_ids)
        if not ids:
            return {}
        rows = self.db.execute(select(Product).where(Product.id.in_(ids))).scalars().all()
        return {product.id: product for product in rows}

    def create_product(
        self,
        *,
        name: str = "",
        sku: str = "",
        quantity: Optional[int] = None,
        location: str = "",
        supplier: str = "",
    ) -> Product:
        product = Product(
            name=name or "",
            sku=sku or "",
            quantity=quantity if quantity is not None else 0,
            location=location or "",
            supplier=supplier or "",
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def set_quantity(self, product_id: int, quantity: int) -> Optional[Product]:
        product = self.get_product(product_id)
        if product is None:
            return None
        product.quantity = quantity
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> None:
        self.db.execute(delete(Product).where(Product.id == product_id))
        self.db.commit()

    def decrement(self, product_id: int, quantity: int) -> None:
        # applied in SQL; the caller commits
        self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(quantity=Product.quantity - quantity)
        )


__all__ = ["ProductStore"]
