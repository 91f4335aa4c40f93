import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine

from stocktrack.config import Settings, get_settings
from stocktrack.core.constants import API_PREFIX, EXPORTS_URL_PATH
from stocktrack.database import Base, build_session_factory, engine
from stocktrack.models import import_all_models
from stocktrack.routers import health_router, products_router, sales_router
from stocktrack.services.export_service import SalesWorkbookExporter, ensure_exports_dir

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info(
        "%s started (environment=%s, exports=%s)",
        settings.APP_NAME,
        settings.ENVIRONMENT,
        app.state.exporter.exports_dir,
    )
    yield
    logger.info("%s stopped", settings.APP_NAME)


def create_app(settings: Optional[Settings] = None, db_engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    db_engine = db_engine or engine

    import_all_models()
    Base.metadata.create_all(bind=db_engine)
    exports_dir = ensure_exports_dir(settings.EXPORTS_DIR)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = build_session_factory(db_engine)
    app.state.exporter = SalesWorkbookExporter.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount(EXPORTS_URL_PATH, StaticFiles(directory=str(exports_dir)), name="exports")

    app.include_router(health_router)
    app.include_router(products_router, prefix=API_PREFIX)
    app.include_router(sales_router, prefix=API_PREFIX)
    return app


__all__ = ["create_app"]
