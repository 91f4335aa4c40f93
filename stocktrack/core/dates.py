from datetime import date, datetime, time

SALE_DATE_FORMAT = "%d/%m/%Y"


def _to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def normalize_date(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        return _to_local_naive(value).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        try:
            return date.fromisoformat(value_text)
        except ValueError:
            pass
        try:
            return _to_local_naive(datetime.fromisoformat(value_text)).date()
        except ValueError:
            return None
    return None


def normalize_datetime(value):
    """Parse a timestamp into a naive local datetime, or None when it does not parse.

    Date-only input resolves to midnight of that day.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        try:
            return _to_local_naive(datetime.fromisoformat(value_text))
        except ValueError:
            return None
    return None


def is_date_only(value) -> bool:
    if isinstance(value, str):
        try:
            date.fromisoformat(value.strip())
        except ValueError:
            return False
        return True
    return isinstance(value, date) and not isinstance(value, datetime)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def format_sale_date(value) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = _to_local_naive(value)
    return value.strftime(SALE_DATE_FORMAT)


__all__ = [
    "SALE_DATE_FORMAT",
    "day_bounds",
    "format_sale_date",
    "is_date_only",
    "normalize_date",
    "normalize_datetime",
]
