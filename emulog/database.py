"""
Database engine, session factory, and table creation.
Uses SQLAlchemy with an embedded SQLite file. Nothing is created at import
time: the entry point builds the engine and hands it to Storage.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Provider batches share one engine across asyncio tasks
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        connect_args=connect_args,
        echo=False,                  # Set True to log all SQL queries (debug only)
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(engine: Engine):
    """
    Creates all DB tables. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from emulog.models.scan_code import ScanCode               # noqa
    from emulog.models.assignment_log import AssignmentLog     # noqa

    Base.metadata.create_all(bind=engine)
