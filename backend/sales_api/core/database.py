"""
Conexión a base de datos (PostgreSQL via psycopg2, SQLite en desarrollo)

Este módulo centraliza el acceso a la base de datos:
- Engine y Session factory de SQLAlchemy
- Dependency de FastAPI con una sesión por request
- Verificación de conexión con retry (recuperación de fallos SSL/red)

Author: TM3
Updated: 2025-10-17
"""
import time
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration
# ============================================================================

def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL

    SQLite does not accept the connection pool arguments used for
    PostgreSQL, so they are only passed to server databases.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Verificar conexión antes de usar
        pool_size=settings.DB_POOL_SIZE,  # Número de conexiones en el pool
        max_overflow=settings.DB_MAX_OVERFLOW,  # Conexiones extras si se necesitan
    )


# SQLAlchemy Engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para modelos
Base = declarative_base()


def get_db():
    """
    FastAPI dependency para obtener sesión de SQLAlchemy

    One session per request; the unit of work built on top of it
    decides when to commit.

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None) -> None:
    """Create all tables registered on Base (schema migrations are external)"""
    # Import models so they are registered on Base.metadata
    from sales_api import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# ============================================================================
# Connection check with Retry Logic (SSL Failure Recovery)
# ============================================================================

def wait_for_database(bind: Engine = None, max_retries: int = None, retry_delay: float = None) -> float:
    """
    Check the database is reachable, retrying on connection failures

    Handles intermittent connection issues by:
    - Retrying failed connections up to max_retries times
    - Adding exponential backoff between retries
    - Logging connection attempts for debugging

    Args:
        bind: Engine to check (default: application engine)
        max_retries: Maximum number of connection attempts (default: settings.DB_CONNECT_RETRIES)
        retry_delay: Initial delay between retries in seconds (default: settings.DB_CONNECT_RETRY_DELAY)

    Returns:
        Latency of the successful check in milliseconds

    Raises:
        sqlalchemy.exc.OperationalError: If all retry attempts fail
    """
    bind = bind or engine
    max_retries = max_retries or settings.DB_CONNECT_RETRIES
    retry_delay = settings.DB_CONNECT_RETRY_DELAY if retry_delay is None else retry_delay

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            start = time.time()
            with bind.connect() as conn:
                conn.execute(text("SELECT 1"))
            latency_ms = round((time.time() - start) * 1000, 2)

            logger.debug(f"Database connection successful on attempt {attempt}")
            return latency_ms

        except OperationalError as e:
            error_msg = str(e)

            if "SSL connection has been closed unexpectedly" in error_msg:
                logger.warning(f"SSL connection error on attempt {attempt}/{max_retries}: {error_msg}")
            else:
                logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {error_msg}")

            # Don't retry on last attempt
            if attempt < max_retries:
                # Exponential backoff
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")
                raise
