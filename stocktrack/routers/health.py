from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stocktrack.database.session import get_db

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(request: Request, db: Session = Depends(get_db)):
    settings = request.app.state.settings
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        database = "error: {}".format(exc)
    return {
        "status": "ok" if database == "ok" else "degraded",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "database": database,
        "time": datetime.now(timezone.utc).isoformat(),
    }
