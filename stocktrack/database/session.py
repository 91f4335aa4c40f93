from fastapi import Request
from sqlalchemy.orm import sessionmaker

from stocktrack.database.engine import engine


def build_session_factory(bind):
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=bind,
    )


SessionLocal = build_session_factory(engine)


def get_db(request: Request):
    session_factory = getattr(request.app.state, "session_factory", SessionLocal)
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
