# src/emp_crud/utils/database.py
from fastapi import HTTPException
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.exc import SQLAlchemyError
import logging

from src.emp_crud.config import settings

# Configure logging for better error tracing
logger = logging.getLogger(__name__)
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

DATABASE_URL = settings.DATABASE_URL


def _engine_kwargs(url: str) -> dict:
    """
    Pool sizing and connect timeout only apply to server databases;
    SQLite (aiosqlite) uses a static/null pool and rejects these options.
    """
    kwargs = {
        "echo": settings.DB_ECHO,  # Logs all SQL queries if True
        "pool_pre_ping": True,     # Ensures the connections are valid before using them
    }
    if make_url(url).get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            connect_args={"timeout": settings.DB_TIMEOUT},
        )
    return kwargs


def build_engine(url: str = DATABASE_URL):
    try:
        eng = create_async_engine(url, **_engine_kwargs(url))
    except SQLAlchemyError as e:
        logger.error(f"Error creating database engine: {e}")
        raise RuntimeError(f"Database connection failed: {e}") from e
    logger.info("Database engine ready: %s", make_url(url).render_as_string(hide_password=True))
    return eng


engine = build_engine()

# Use async_sessionmaker to create sessionmaker for async SQLAlchemy session
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autoflush=False,         # To avoid flushing automatically
    expire_on_commit=False,  # Don't expire objects after commit
)


# Base class for SQLAlchemy ORM models
class Base(DeclarativeBase):
    pass


async def init_db(eng=None) -> None:
    """Create all tables registered on Base (no migrations)."""
    # register models on Base.metadata
    from src.emp_crud.models import emp  # noqa: F401

    eng = eng or engine
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created: %s", ", ".join(Base.metadata.tables))


# Dependency to retrieve a database session in FastAPI
# Ensures the session is properly closed after use
async def get_db():
    try:
        async with AsyncSessionLocal() as session:
            yield session
    except SQLAlchemyError as e:
        logger.error(f"Error: while interacting with the database: {e}")
        raise HTTPException(status_code=500, detail=f"Database operation failed: {e}")
