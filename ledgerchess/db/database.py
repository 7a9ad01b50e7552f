"""Generate database sessions"""

import logging
from typing import Any, Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from ledgerchess.core.config import Settings
from ledgerchess.db.schema import Base

logger = logging.getLogger(__name__)

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(settings: Settings) -> Engine:
    """Engine for the configured database. Ensures all tables are created."""
    options: dict[str, Any] = {"echo": settings.sql_echo}
    if settings.database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    if settings.database_url in IN_MEMORY_URLS:
        # every new connection would otherwise see its own, empty, database
        options["poolclass"] = StaticPool
    engine = create_engine(settings.database_url, **options)
    Base.metadata.create_all(bind=engine)
    logger.info("Ledger database ready at %s", engine.url.render_as_string(hide_password=True))
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False)


def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = factory()
    try:
        yield db
    finally:
        db.close()
