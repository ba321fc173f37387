import logging
from typing import Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import settings
from .exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def on_connect(dbapi_conn, connection_record):
    """
    Event listener for new database connections.
    Attached to every engine created by build_engine.
    """
    if settings.DEBUG:
        logger.debug("New database connection established")


def build_engine(database_url: str, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine for the given URL.

    Server databases get the pooled configuration from settings. SQLite
    connections may be shared across threads, and in-memory databases use a
    single static connection so every session sees the same data.
    """
    if echo is None:
        echo = settings.DB_ECHO_SQL

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", on_connect)
        return engine

    engine = create_engine(
        url,

        # Connection pool settings
        poolclass=QueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,

        # Test connection before using (detect disconnects)
        pool_pre_ping=True,

        echo=echo,

        connect_args={
            "connect_timeout": 10,  # seconds
        }
    )
    event.listen(engine, "connect", on_connect)
    return engine


def build_session_factory(bind: Engine) -> sessionmaker:
    """Session factory used as the persistence context of the DAO."""
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=bind,
        expire_on_commit=False  # Keep loaded values (and generated ids) after commit
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = build_session_factory(engine)


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(bind: Optional[Engine] = None):
    """
    Create all database tables defined in models.

    Only meant for development and tests. Use Alembic migrations otherwise.
    """
    # Register the models on Base.metadata
    import cruddemo.models  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created successfully")


def drop_database_tables(bind: Optional[Engine] = None):
    """
    Drop all database tables.

    This deletes all data.
    """
    import cruddemo.models  # noqa: F401

    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=bind or engine)
    logger.info("Database tables dropped")


def check_database_connection(bind: Optional[Engine] = None) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(bind: Optional[Engine] = None):
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection(bind):
        raise DatabaseConnectionError("Cannot connect to database!")

    if settings.AUTO_CREATE_TABLES:
        create_database_tables(bind)

    logger.info("Database initialized successfully")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    if check_database_connection():
        print("Connection successful!")
    else:
        print("Connection failed!")
