from sqlalchemy import func, select
from sqlalchemy.orm import Session

from stocktrack.core.dates import day_bounds, normalize_date
from stocktrack.core.errors import SaleValidationError
from stocktrack.models.sales import Sale, SaleItem


def channel_totals(db: Session, start, end) -> list[dict]:
    stmt = (
        select(
            Sale.channel,
            func.coalesce(func.sum(SaleItem.quantity), 0).label("total_quantity"),
            func.count(func.distinct(Sale.id)).label("total_orders"),
        )
        .join(SaleItem, SaleItem.sale_id == Sale.id)
        .where(Sale.date >= start, Sale.date <= end)
        .group_by(Sale.channel)
        .order_by(Sale.channel)
    )
    return [
        {
            "channel": row.channel,
            "total_quantity": int(row.total_quantity),
            "total_orders": int(row.total_orders),
        }
        for row in db.execute(stmt)
    ]


def overall_totals(db: Session, start, end) -> dict:
    in_range = (Sale.date >= start, Sale.date <= end)
    total_orders = db.execute(select(func.count(Sale.id)).where(*in_range)).scalar_one()
    total_quantity = db.execute(
        select(func.coalesce(func.sum(SaleItem.quantity), 0))
        .join(Sale, SaleItem.sale_id == Sale.id)
        .where(*in_range)
    ).scalar_one()
    return {"total_orders": int(total_orders), "total_quantity": int(total_quantity)}


def daily_summary(db: Session, day_text: str) -> dict:
    day = normalize_date(day_text)
    if day is None:
        raise SaleValidationError("Invalid date format")

    start, end = day_bounds(day)
    return {
        "date": day_text,
        "channels": channel_totals(db, start, end),
        "overall": overall_totals(db, start, end),
    }


__all__ = ["channel_totals", "daily_summary", "overall_totals"]
