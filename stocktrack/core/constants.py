API_PREFIX = "/api"
EXPORTS_URL_PATH = "/exports"

SALES_SHEET_HEADER = ("Date", "Channel", "Product", "SKU", "Quantity")
UNKNOWN_PRODUCT_NAME = "Unknown"
MISSING_SKU = "-"

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# SQLite INTEGER primary keys are signed 64-bit
MAX_PRODUCT_ID = 2**63 - 1
