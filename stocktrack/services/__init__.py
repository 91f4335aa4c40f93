from stocktrack.services.export_service import SalesWorkbookExporter
from stocktrack.services.product_store import ProductStore
from stocktrack.services.sale_store import SaleStore
from stocktrack.services.stock_service import record_sale
from stocktrack.services.summary_service import daily_summary

__all__ = [
    "ProductStore",
    "SaleStore",
    "SalesWorkbookExporter",
    "daily_summary",
    "record_sale",
]
