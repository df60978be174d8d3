"""Database handle, session factory, and base model."""

from collections.abc import Generator
from datetime import UTC, datetime

from fastapi import Request
from sqlalchemy import Column, DateTime, Integer, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool


class Base(DeclarativeBase):
    pass


class Database:
    """Connection pool and session factory, built once at startup and shared by every request."""

    def __init__(self, url: str) -> None:
        if url.startswith("sqlite"):
            self.engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_engine(
                url,
                poolclass=QueuePool,
                pool_size=5,
                max_overflow=10,
                pool_pre_ping=True,
            )
        self.session_factory = sessionmaker(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


class DocumentMixin:
    """Columns every portfolio collection carries.

    `id` is assigned by the service layer (highest id + 1), never by the
    database; it is also the primary key, so a concurrent create that picks
    the same id fails on insert instead of duplicating it.
    """

    id = Column(Integer, primary_key=True, autoincrement=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC))
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
