import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.core import config

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    options = {}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if config.is_memory_database(url):
            # One shared connection, otherwise every session sees an empty database.
            options["poolclass"] = StaticPool

    return create_engine(url, **options)


engine = build_engine(config.DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(bind: Engine | None = None) -> None:
    """Verify the connection and create any missing tables."""
    # Imported for their side effect of registering tables on Base.metadata.
    from backend.models import course, user  # noqa: F401

    bind = bind or engine
    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Connection to the database successful")

    Base.metadata.create_all(bind=bind)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
