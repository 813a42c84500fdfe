"""
Database engine and session setup for the SQL storage backend
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def make_engine(database_url: str):
    """Create an engine, relaxing sqlite's same-thread check for the ASGI worker pool"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine) -> None:
    """Create all tables known to the models package"""
    import app.models  # noqa: F401  registers the tables on Base.metadata
    Base.metadata.create_all(bind=engine)
