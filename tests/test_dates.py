import unittest
from datetime import date, datetime, time, timedelta, timezone

from stocktrack.core.dates import (
    day_bounds,
    format_sale_date,
    is_date_only,
    normalize_date,
    normalize_datetime,
)


class DatesTest(unittest.TestCase):
    def test_normalize_date(self):
        self.assertEqual(normalize_date("2024-05-01"), date(2024, 5, 1))
        self.assertEqual(normalize_date("2024-05-01T08:15:00"), date(2024, 5, 1))
        self.assertIsNone(normalize_date("01/05/2024"))
        self.assertIsNone(normalize_date(""))
        self.assertIsNone(normalize_date(None))

    def test_normalize_datetime_converts_aware_to_local(self):
        aware = datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        expected = aware.astimezone().replace(tzinfo=None)
        self.assertEqual(normalize_datetime("2024-05-01T12:00:00+02:00"), expected)
        self.assertEqual(normalize_datetime("2024-05-01"), datetime(2024, 5, 1))
        self.assertIsNone(normalize_datetime("tomorrow"))

    def test_is_date_only(self):
        self.assertTrue(is_date_only("2024-05-01"))
        self.assertFalse(is_date_only("2024-05-01T00:00:00"))
        self.assertFalse(is_date_only(datetime(2024, 5, 1)))

    def test_day_bounds(self):
        start, end = day_bounds(date(2024, 5, 1))
        self.assertEqual(start, datetime(2024, 5, 1, 0, 0))
        self.assertEqual(end, datetime.combine(date(2024, 5, 1), time.max))

    def test_format_sale_date_is_day_month_year(self):
        self.assertEqual(format_sale_date(datetime(2024, 5, 1, 23, 0)), "01/05/2024")
        self.assertEqual(format_sale_date(date(2024, 12, 9)), "09/12/2024")


if __name__ == "__main__":
    unittest.main()
