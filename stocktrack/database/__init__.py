from stocktrack.database.base import Base
from stocktrack.database.engine import build_engine, engine
from stocktrack.database.session import SessionLocal, build_session_factory, get_db

__all__ = ["Base", "SessionLocal", "build_engine", "build_session_factory", "engine", "get_db"]
