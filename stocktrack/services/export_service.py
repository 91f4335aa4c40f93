import logging
from pathlib import Path
from typing import Iterable

from openpyxl import Workbook, load_workbook

from stocktrack.core.constants import MISSING_SKU, SALES_SHEET_HEADER, UNKNOWN_PRODUCT_NAME
from stocktrack.core.dates import format_sale_date
from stocktrack.core.errors import NotFoundError
from stocktrack.models.product import Product
from stocktrack.models.sales import Sale

logger = logging.getLogger(__name__)


def build_rows(sale: Sale, products: dict[int, Product]) -> list[list]:
    """One worksheet row per line item, in the order of SALES_SHEET_HEADER."""
    sale_date = format_sale_date(sale.date)
    rows = []
    for item in sale.items:
        product = products.get(item.product_id)
        rows.append(
            [
                sale_date,
                sale.channel,
                (product.name if product is not None else None) or UNKNOWN_PRODUCT_NAME,
                (product.sku if product is not None else None) or MISSING_SKU,
                item.quantity,
            ]
        )
    return rows


def _sheet_is_empty(worksheet) -> bool:
    return worksheet.max_row <= 1 and worksheet.cell(row=1, column=1).value is None


def ensure_exports_dir(path):
    exports_dir = Path(path)
    exports_dir.mkdir(parents=True, exist_ok=True)
    return exports_dir


class SalesWorkbookExporter:
    """Writes sale line items to .xlsx files in the exports directory.

    ``append_sale`` keeps a running workbook updated as sales are recorded;
    ``rebuild`` regenerates a separate workbook from every stored sale.
    """

    def __init__(
        self,
        exports_dir,
        incremental_name="sales.xlsx",
        export_name="sales_export.xlsx",
        sheet_name="Sales",
    ):
        self.exports_dir = Path(exports_dir)
        self.incremental_name = incremental_name
        self.export_name = export_name
        self.sheet_name = sheet_name

    @property
    def incremental_path(self) -> Path:
        return self.exports_dir / self.incremental_name

    @property
    def export_path(self) -> Path:
        return self.exports_dir / self.export_name

    def has_incremental(self) -> bool:
        return self.incremental_path.is_file()

    def require_incremental(self) -> Path:
        if not self.has_incremental():
            raise NotFoundError("No sales records found")
        return self.incremental_path

    def _open_incremental(self):
        if self.has_incremental():
            workbook = load_workbook(self.incremental_path)
            if self.sheet_name in workbook.sheetnames:
                return workbook, workbook[self.sheet_name]
            return workbook, workbook.create_sheet(self.sheet_name)
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = self.sheet_name
        return workbook, worksheet

    def append_sale(self, sale: Sale, products: dict[int, Product]) -> Path:
        ensure_exports_dir(self.exports_dir)
        workbook, worksheet = self._open_incremental()
        if _sheet_is_empty(worksheet):
            worksheet.append(list(SALES_SHEET_HEADER))
        for row in build_rows(sale, products):
            worksheet.append(row)
        workbook.save(self.incremental_path)
        logger.debug("Appended sale %s to %s", sale.id, self.incremental_path)
        return self.incremental_path

    def rebuild(self, sales: Iterable[Sale], products: dict[int, Product]) -> Path:
        sales = list(sales)
        if not sales:
            raise NotFoundError("No sales found")

        ensure_exports_dir(self.exports_dir)
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = self.sheet_name
        worksheet.append(list(SALES_SHEET_HEADER))
        row_count = 0
        for sale in sales:
            for row in build_rows(sale, products):
                worksheet.append(row)
                row_count += 1
        workbook.save(self.export_path)
        logger.info("Sales export written to %s (%d rows)", self.export_path, row_count)
        return self.export_path

    @classmethod
    def from_settings(cls, settings):
        return cls(
            settings.EXPORTS_DIR,
            incremental_name=settings.SALES_WORKBOOK_NAME,
            export_name=settings.EXPORT_WORKBOOK_NAME,
            sheet_name=settings.SALES_SHEET_NAME,
        )


__all__ = ["SalesWorkbookExporter", "build_rows", "ensure_exports_dir"]
