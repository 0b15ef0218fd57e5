import os
from functools import lru_cache

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.models import Base

# Load environment variables before reading DATABASE_URL
load_dotenv()


def get_database_url(database_url=None):
    """Return the explicit URL, falling back to DATABASE_URL from the environment"""
    url = database_url or os.getenv("DATABASE_URL")
    if not url:
        raise ValueError("DATABASE_URL not found in environment variables")
    return url


@lru_cache(maxsize=None)
def _create_engine(url):
    """
    Create a SQLAlchemy engine (one per URL for the life of the process)

    Connection pooling is enabled for server databases:
    - pool_pre_ping: Verify connections before using (handle stale connections)
    - pool_size: Number of connections to maintain in pool
    - max_overflow: Additional connections allowed when pool is full
    - pool_recycle: Recycle connections after 1 hour

    SQLite (used in tests and local runs) gets the driver's default pool.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=False)

    engine = create_engine(
        url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,
        echo=False,  # Set to True for SQL debugging
    )
    return engine


def get_engine(database_url=None):
    """Return the shared engine for the given URL (default: DATABASE_URL)"""
    return _create_engine(get_database_url(database_url))


@lru_cache(maxsize=None)
def _session_factory(url):
    return sessionmaker(autocommit=False, autoflush=False, bind=_create_engine(url))


def init_db(engine=None, database_url=None):
    """Initialize the database by creating all tables"""
    if engine is None:
        engine = get_engine(database_url)

    # Create all tables
    Base.metadata.create_all(bind=engine)
    return engine


def get_session(database_url=None) -> Session:
    """Get a new database session bound to the shared engine"""
    SessionLocal = _session_factory(get_database_url(database_url))
    return SessionLocal()


def get_db():
    """FastAPI dependency yielding a database session"""
    db = get_session()
    try:
        yield db
    finally:
        db.close()
