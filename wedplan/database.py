from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from supabase import create_client, Client
import logging

from .config import DATABASE_URL, SUPABASE_URL, SUPABASE_ANON_KEY

logger = logging.getLogger(__name__)


def make_engine(url: str) -> Engine:
    """Engine for the given URL. SQLite gets foreign keys switched on so
    ON DELETE CASCADE behaves the same as on Postgres."""
    if url.startswith("sqlite"):
        new_engine = create_engine(url, connect_args={"check_same_thread": False})

        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return new_engine

    # Postgres (Supabase) drops idle connections
    return create_engine(url, pool_pre_ping=True, pool_recycle=300)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# Only used to verify bearer tokens
supabase: Client = None
if SUPABASE_URL and SUPABASE_ANON_KEY:
    supabase = create_client(SUPABASE_URL, SUPABASE_ANON_KEY)
else:
    logger.warning("SUPABASE_URL/SUPABASE_ANON_KEY not set, authenticated routes will fail")


def get_db():
    """One session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_supabase() -> Client:
    if not supabase:
        raise RuntimeError(
            "Supabase client not initialized. Check your environment variables."
        )
    return supabase


def init_db():
    """Create missing tables for every wedplan model"""
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_db_connection() -> dict:
    status = {"database": False, "auth": supabase is not None}

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        status["database"] = True
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")

    return status
