from stocktrack.routers.health import router as health_router
from stocktrack.routers.products import router as products_router
from stocktrack.routers.sales import router as sales_router

__all__ = [
    "health_router",
    "products_router",
    "sales_router",
]
