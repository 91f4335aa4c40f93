from fastapi import Depends, Request
from sqlalchemy.orm import Session

from stocktrack.database.session import get_db
from stocktrack.services.export_service import SalesWorkbookExporter
from stocktrack.services.product_store import ProductStore
from stocktrack.services.sale_store import SaleStore


def get_product_store(db: Session = Depends(get_db)) -> ProductStore:
    return ProductStore(db)


def get_sale_store(db: Session = Depends(get_db)) -> SaleStore:
    return SaleStore(db)


def get_exporter(request: Request) -> SalesWorkbookExporter:
    return request.app.state.exporter


__all__ = ["get_db", "get_exporter", "get_product_store", "get_sale_store"]
