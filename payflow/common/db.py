"""Database bootstrap helpers for the SQL-backed payment repository."""

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker


class Base(DeclarativeBase):
    """Declarative base for SQLAlchemy models."""

    pass


def make_session_factory(dsn: str) -> sessionmaker:
    """Build one engine for `dsn` and return a session factory bound to it."""

    connect_args = {"check_same_thread": False} if dsn.startswith("sqlite") else {}
    engine = create_engine(dsn, pool_pre_ping=True, connect_args=connect_args)
    # `expire_on_commit=False` keeps ORM objects readable after commit.
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
