import importlib

from stocktrack.models.product import Product
from stocktrack.models.sales import Sale, SaleItem


def import_all_models() -> None:
    for module_name in (
        "stocktrack.models.product",
        "stocktrack.models.sales",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Product",
    "Sale",
    "SaleItem",
    "import_all_models",
]
