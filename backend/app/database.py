from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)

# Pool sizing for server databases; SQLite keeps SQLAlchemy's defaults
SERVER_POOL_OPTIONS = {
    "pool_size": 5,
    "max_overflow": 10,
    "pool_timeout": 30,
    "pool_recycle": 1800,
    "pool_pre_ping": True,
}


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``: threadsafe SQLite or a pooled server connection."""
    url = make_url(database_url)
    options: dict[str, Any] = {"echo": False}
    if url.get_backend_name() == "sqlite":
        # FastAPI runs sync handlers in a threadpool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(SERVER_POOL_OPTIONS)

    engine = create_engine(url, **options)
    logger.info(f"Database engine ready ({url.get_backend_name()}, {url.database or 'memory'})")
    return engine


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


@contextmanager
def get_session() -> Iterator[Session]:
    """Session for scripts and seeding, outside the request cycle."""
    session: Session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
