import logging
from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from campus_backend.settings import settings

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
_session_factory: Optional[Callable[[], Session]] = None


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Build an engine for database_url.

    SQLite engines share one connection across threads (the document store
    runs its sessions in worker threads); every other backend gets a pool.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, future=True, **options)

    return create_engine(
        database_url,
        echo=echo,
        poolclass=QueuePool,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_recycle=1800,     # 30 min - protects against idle disconnects
        pool_pre_ping=True,    # avoids stale connections
        future=True,
    )


def create_session_factory(engine: Engine) -> Callable[[], Session]:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        expire_on_commit=False,
        autoflush=False,
        class_=Session,
    )


def get_engine() -> Engine:
    """Process-wide engine, created from settings on first use."""
    global _engine
    if _engine is None:
        _engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        logger.info(f"Database engine created for {_engine.url.render_as_string(hide_password=True)}")
    return _engine


def get_session_factory() -> Callable[[], Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


@contextmanager
def session_scope(session_factory: Optional[Callable[[], Session]] = None) -> Generator[Session, None, None]:
    """
    Transactional session scope.

    Handles:
    - Session creation and cleanup
    - Commit on success
    - Rollback on exceptions
    """
    db = (session_factory or get_session_factory())()
    try:
        yield db

        if db.in_transaction():
            db.commit()
    except Exception:
        if db.in_transaction():
            db.rollback()
        raise
    finally:
        db.close()
