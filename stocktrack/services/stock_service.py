"""Sale recording.

Recording a sale is a sequence of independent writes with no compensation:

1. validate every line item (identifier, quantity, stock on hand),
2. decrement each product's quantity with its own UPDATE and commit,
3. persist the sale,
4. append the sale's rows to the incremental workbook.

A failure in step 3 or 4 leaves the earlier steps applied. The availability
check and the decrement are not guarded against concurrent sales of the same
product.
"""

import logging
from typing import Optional

from stocktrack.core.constants import MAX_PRODUCT_ID, UNKNOWN_PRODUCT_NAME
from stocktrack.core.dates import normalize_datetime
from stocktrack.core.errors import SaleValidationError
from stocktrack.models.sales import Sale
from stocktrack.services.export_service import SalesWorkbookExporter
from stocktrack.services.product_store import ProductStore
from stocktrack.services.sale_store import SaleStore

logger = logging.getLogger(__name__)


def parse_product_id(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            return None
        value = int(text)
    if isinstance(value, int) and 0 < value <= MAX_PRODUCT_ID:
        return value
    return None


def parse_item_quantity(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return value if value > 0 else None
    return None


def validate_items(items) -> list[tuple[int, int]]:
    if not items:
        raise SaleValidationError("No items provided")

    parsed = []
    for item in items:
        product_id = parse_product_id(item.product_id)
        if product_id is None:
            raise SaleValidationError(f"Invalid productId: {item.product_id}")
        quantity = parse_item_quantity(item.quantity)
        if quantity is None:
            raise SaleValidationError(f"Invalid quantity for productId: {item.product_id}")
        parsed.append((product_id, quantity))
    return parsed


def check_stock(product_store: ProductStore, items: list[tuple[int, int]]):
    """Return the referenced products once every item can be fulfilled."""
    requested: dict[int, int] = {}
    for product_id, quantity in items:
        requested[product_id] = requested.get(product_id, 0) + quantity

    products = product_store.get_many(requested)
    for product_id, quantity in requested.items():
        product = products.get(product_id)
        if product is None or product.quantity < quantity:
            name = product.name if product is not None and product.name else UNKNOWN_PRODUCT_NAME
            raise SaleValidationError(f"Insufficient stock for {name}")
    return products


def resolve_sale_date(value):
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = normalize_datetime(value)
    if parsed is None:
        raise SaleValidationError("Invalid date format")
    return parsed


def record_sale(
    product_store: ProductStore,
    sale_store: SaleStore,
    exporter: SalesWorkbookExporter,
    *,
    channel: str,
    items,
    date=None,
) -> tuple[Sale, dict]:
    parsed_items = validate_items(items)
    sale_date = resolve_sale_date(date)
    products = check_stock(product_store, parsed_items)

    for product_id, quantity in parsed_items:
        product_store.decrement(product_id, quantity)
    product_store.db.commit()

    sale = sale_store.create_sale(channel, parsed_items, sale_date)
    logger.info(
        "Recorded sale %s on channel %r (%d items)",
        sale.id,
        sale.channel,
        len(parsed_items),
    )

    exporter.append_sale(sale, products)
    return sale, products


__all__ = [
    "check_stock",
    "parse_item_quantity",
    "parse_product_id",
    "record_sale",
    "resolve_sale_date",
    "validate_items",
]
