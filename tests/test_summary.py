import unittest
from datetime import datetime
from unittest.mock import patch

from support import AppTestCase

from stocktrack.core.errors import SaleValidationError
from stocktrack.models.sales import Sale, SaleItem
from stocktrack.services.summary_service import daily_summary


class DailySummaryTest(AppTestCase, unittest.TestCase):
    def add_sale(self, channel, when, *quantities):
        db = self.Session()
        try:
            sale = Sale(channel=channel, date=when)
            for position, quantity in enumerate(quantities):
                sale.items.append(SaleItem(position=position, product_id=1, quantity=quantity))
            db.add(sale)
            db.commit()
        finally:
            db.close()

    def summarize(self, day_text):
        db = self.Session()
        try:
            return daily_summary(db, day_text)
        finally:
            db.close()

    def test_empty_day(self):
        summary = self.summarize("2024-05-01")

        self.assertEqual(summary["date"], "2024-05-01")
        self.assertEqual(summary["channels"], [])
        self.assertEqual(summary["overall"], {"total_orders": 0, "total_quantity": 0})

    def test_channels_sorted_with_overall_totals(self):
        self.add_sale("B", datetime(2024, 5, 1, 9, 0), 5)
        self.add_sale("A", datetime(2024, 5, 1, 18, 30), 2)

        summary = self.summarize("2024-05-01")

        self.assertEqual(
            summary["channels"],
            [
                {"channel": "A", "total_quantity": 2, "total_orders": 1},
                {"channel": "B", "total_quantity": 5, "total_orders": 1},
            ],
        )
        self.assertEqual(summary["overall"], {"total_orders": 2, "total_quantity": 7})

    def test_orders_count_sales_not_line_items(self):
        self.add_sale("A", datetime(2024, 5, 1, 12, 0), 1, 2, 3)

        summary = self.summarize("2024-05-01")

        self.assertEqual(summary["channels"], [{"channel": "A", "total_quantity": 6, "total_orders": 1}])
        self.assertEqual(summary["overall"], {"total_orders": 1, "total_quantity": 6})

    def test_day_boundaries_are_inclusive(self):
        self.add_sale("A", datetime(2024, 5, 1, 0, 0, 0), 1)
        self.add_sale("A", datetime(2024, 5, 1, 23, 59, 59, 999999), 1)
        self.add_sale("A", datetime(2024, 4, 30, 23, 59, 59), 10)
        self.add_sale("A", datetime(2024, 5, 2, 0, 0, 0), 10)

        summary = self.summarize("2024-05-01")

        self.assertEqual(summary["overall"], {"total_orders": 2, "total_quantity": 2})

    def test_unparseable_date(self):
        with self.assertRaises(SaleValidationError):
            self.summarize("not-a-date")

    def test_summary_route_uses_camel_case(self):
        self.add_sale("A", datetime(2024, 5, 1, 9, 0), 2)
        self.add_sale("B", datetime(2024, 5, 1, 10, 0), 5)

        response = self.client.get("/api/sales/summary/2024-05-01")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "date": "2024-05-01",
                "channels": [
                    {"channel": "A", "totalQuantity": 2, "totalOrders": 1},
                    {"channel": "B", "totalQuantity": 5, "totalOrders": 1},
                ],
                "overall": {"totalOrders": 2, "totalQuantity": 7},
            },
        )

    def test_summary_route_rejects_bad_date(self):
        response = self.client.get("/api/sales/summary/2024-13-45")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Invalid date format")

    def test_summary_route_requires_zero_padded_iso_date(self):
        response = self.client.get("/api/sales/summary/2024-1-5")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Invalid date format")

    def test_summary_route_reports_unexpected_failure(self):
        with patch("stocktrack.routers.sales.daily_summary", side_effect=RuntimeError("aggregation failed")):
            response = self.client.get("/api/sales/summary/2024-05-01")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "aggregation failed"})


if __name__ == "__main__":
    unittest.main()
