import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse

from stocktrack.core.constants import EXPORTS_URL_PATH, XLSX_MEDIA_TYPE
from stocktrack.core.dates import day_bounds, is_date_only, normalize_date, normalize_datetime
from stocktrack.core.errors import NotFoundError, SaleValidationError
from stocktrack.dependencies import get_exporter, get_product_store, get_sale_store
from stocktrack.schemas.sale import DailySummary, ExportResponse, SaleCreate, SaleRead
from stocktrack.services.export_service import SalesWorkbookExporter
from stocktrack.services.product_store import ProductStore
from stocktrack.services.sale_store import SaleStore, serialize_sale
from stocktrack.services.stock_service import record_sale
from stocktrack.services.summary_service import daily_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.post("", response_model=SaleRead)
def create_sale(
    payload: SaleCreate,
    product_store: ProductStore = Depends(get_product_store),
    sale_store: SaleStore = Depends(get_sale_store),
    exporter: SalesWorkbookExporter = Depends(get_exporter),
):
    try:
        sale, products = record_sale(
            product_store,
            sale_store,
            exporter,
            channel=payload.channel,
            items=payload.items,
            date=payload.date,
        )
    except SaleValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error recording sale: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return serialize_sale(sale, products)


@router.get("/download")
def download_sales_workbook(exporter: SalesWorkbookExporter = Depends(get_exporter)):
    try:
        path = exporter.require_incremental()
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return FileResponse(
        path,
        media_type=XLSX_MEDIA_TYPE,
        filename=exporter.incremental_name,
        headers={"Cache-Control": "no-cache"},
    )


@router.get("/summary/{day}", response_model=DailySummary)
def sales_summary(day: str, sale_store: SaleStore = Depends(get_sale_store)):
    try:
        return daily_summary(sale_store.db, day)
    except SaleValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Sales summary error: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/export", response_model=ExportResponse)
def export_sales(
    sale_store: SaleStore = Depends(get_sale_store),
    exporter: SalesWorkbookExporter = Depends(get_exporter),
):
    try:
        sales = sale_store.list_all()
        path = exporter.rebuild(sales, sale_store.referenced_products(sales))
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Excel export error: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"message": "Excel generated", "file_path": f"{EXPORTS_URL_PATH}/{path.name}"}


def _parse_range_bound(value: Optional[str], field: str, *, end_of_day: bool = False):
    if value is None or not value.strip():
        return None
    if end_of_day and is_date_only(value):
        return day_bounds(normalize_date(value))[1]
    parsed = normalize_datetime(value)
    if parsed is None:
        raise HTTPException(status_code=400, detail=f"Invalid {field} date")
    return parsed


@router.get("/{channel}", response_model=List[SaleRead])
def list_channel_sales(
    channel: str,
    start: Optional[str] = Query(None, description="Earliest sale date (inclusive)"),
    end: Optional[str] = Query(None, description="Latest sale date (inclusive)"),
    sale_store: SaleStore = Depends(get_sale_store),
):
    start_at = _parse_range_bound(start, "start")
    end_at = _parse_range_bound(end, "end", end_of_day=True)
    try:
        sales = sale_store.list_by_channel(channel, start=start_at, end=end_at)
        products = sale_store.referenced_products(sales)
    except Exception as exc:
        logger.exception("Channel sales lookup error: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return [serialize_sale(sale, products) for sale in sales]


__all__ = ["router"]
