from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================


def build_engine_options(database_url: str) -> dict:
    """
    Engine keyword arguments for the given URL.

    SQLite has no server pool or connect timeout, so it only gets echo and
    the thread check relaxed for the threadpool FastAPI runs sync endpoints in.
    """
    options = {"echo": settings.DB_ECHO_SQL}

    if make_url(database_url).get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        return options

    options.update(
        poolclass=QueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,  # detect dropped connections before use
        connect_args={
            "connect_timeout": 10,
        },
    )
    return options


engine = create_engine(settings.DATABASE_URL, **build_engine_options(settings.DATABASE_URL))


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # deleted rows must stay readable for the response
)

Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(bind=None):
    """
    Create all database tables defined in models.

    Only for development. Production schemas are managed by Alembic.
    """
    # Register models on Base.metadata
    import app.models.student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created")


def drop_database_tables(bind=None):
    """
    Drop all database tables.

    This deletes all data. Development and testing only.
    """
    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=bind or engine)
    logger.info("Database tables dropped")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    if settings.DEBUG:
        logger.debug("Connection checked out from pool")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info(f"Initializing database at {settings.masked_database_url()}")

    if not check_database_connection():
        raise RuntimeError("Cannot connect to database!")

    if settings.DB_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized")
