"""
Database engine, session factory, and metadata shared across the application.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeMeta, Session, declarative_base, sessionmaker

from talent_portal.core.config import settings

logger = logging.getLogger(__name__)

_DEFAULT_POOL_KWARGS: dict[str, Any] = {
    "pool_pre_ping": True,
    "pool_recycle": 300,
    "pool_use_lifo": True,
}


def _build_engine_kwargs(db_url: str) -> dict[str, Any]:
    """Pool sizing applies to server databases only; SQLite keeps its default pool."""

    if db_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    kwargs = dict(_DEFAULT_POOL_KWARGS)
    kwargs["pool_size"] = settings.db_pool_size
    kwargs["max_overflow"] = settings.db_max_overflow
    kwargs["pool_timeout"] = settings.db_pool_timeout
    if db_url.startswith("postgresql"):
        kwargs["connect_args"] = {
            "options": f"-c statement_timeout={settings.db_statement_timeout_ms}",
            "connect_timeout": 5,
            "application_name": "talent_portal",
        }
    return kwargs


db_url = settings.database_url
engine: Engine = create_engine(db_url, **_build_engine_kwargs(db_url))


# Log pool events for monitoring
@event.listens_for(engine, "connect")
def receive_connect(dbapi_connection: Any, connection_record: Any) -> None:
    connection_record.info["connect_time"] = datetime.now()
    logger.debug("Database connection established")


@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_connection: Any, connection_record: Any, connection_proxy: Any) -> None:
    logger.debug("Connection checked out from pool")


@event.listens_for(engine, "checkin")
def receive_checkin(dbapi_connection: Any, connection_record: Any) -> None:
    logger.debug("Connection returned to pool")


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)

Base: DeclarativeMeta = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Get database session with proper cleanup."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db_pool_status() -> dict[str, Any]:
    """Get current database pool statistics."""
    pool = engine.pool
    status_fn = getattr(pool, "status", None)
    stats: dict[str, Any] = {"pool_class": type(pool).__name__}
    for name in ("size", "checkedin", "checkedout", "overflow"):
        fn = getattr(pool, name, None)
        if callable(fn):
            stats[name] = fn()
    if callable(status_fn):
        stats["status"] = status_fn()
    return stats


__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "get_db_pool_status",
]
