# db.py
# Role: Database bootstrap for the expense tracker.
#       Defines the SQLAlchemy engine, session factory, and declarative Base.
#       The engine (and its connection pool) is process-wide; sessions are
#       handed out per request by app/deps.py:get_db.

"""
Database setup for the expense tracker.

- Uses DATABASE_URL from config (SQLite file under <project_root>/database by default).
- Ensures the 'database' folder exists when the default location is used.
- init_db() creates the tables and is called once on application startup.
"""

import os
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

import config

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite needs check_same_thread=False because FastAPI runs sync routes
    in a threadpool. An in-memory SQLite database must live on a single
    shared connection (StaticPool), otherwise every session would see an
    empty database of its own.
    """
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    else:
        # Folder for the SQLite file (created on startup if missing)
        db_dir = os.path.dirname(os.path.abspath(url.database))
        os.makedirs(db_dir, exist_ok=True)

    return create_engine(url, echo=echo, **kwargs)


engine = build_engine(config.DATABASE_URL, echo=config.SQL_ECHO)

# Standard session factory used via dependency injection (see app/deps.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()


def init_db(bind: Engine = engine) -> None:
    """
    Create database tables (only if they don't exist yet).
    """
    # Importing models registers them on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database ready (%s)", bind.url.render_as_string(hide_password=True))
