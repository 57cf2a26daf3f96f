import logging
import os
import urllib.parse

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    func,
)
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

metadata = MetaData()

books_table = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("year", Integer),
    Column("author", Text),
    Column("summary", Text),
    Column("publisher", Text),
    Column("page_count", Integer, nullable=False),
    Column("read_page", Integer, nullable=False),
    Column("reading", Boolean),
    Column("finished", Boolean, nullable=False),
    Column("updated_at", DateTime(timezone=True), server_default=func.current_timestamp()),
)


def resolve_database_url(settings) -> str:
    """Pick the database URL for the given settings.

    Resolution order:
      1. `database_url` (the `DATABASE_URL` environment variable)
      2. Individual settings: `db_user`, `db_password`, `db_host`, `db_port`, `db_name`
      3. Fallback to local SQLite file `data/bookshelf.db` (development convenience)
    """
    database_url = settings.get("database_url")
    if database_url:
        return database_url

    user = settings.get("db_user")
    host = settings.get("db_host")
    dbname = settings.get("db_name")
    if user and host and dbname:
        password = settings.get("db_password")
        pwd = f":{urllib.parse.quote_plus(password)}" if password else ""
        port = settings.get("db_port") or "5432"
        return f"postgresql+psycopg2://{user}{pwd}@{host}:{port}/{dbname}"

    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    db_dir = os.path.join(project_root, "data")
    os.makedirs(db_dir, exist_ok=True)
    db_path = os.path.join(db_dir, "bookshelf.db")
    logger.warning(
        "DATABASE_URL not set and DB settings not found, falling back to local sqlite at: %s",
        db_path,
    )
    return f"sqlite:///{db_path}"


def get_engine(settings) -> Engine:
    """Return a SQLAlchemy Engine whose pool is shared for the process lifetime."""
    url = resolve_database_url(settings)
    options = {}
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.get("db_pool_size", 5),
            max_overflow=settings.get("db_max_overflow", 10),
            pool_timeout=settings.get("db_pool_timeout", 30),
            pool_pre_ping=True,
        )
    return create_engine(url, **options)


def init_schema(engine: Engine) -> None:
    """Create the books table if it does not exist yet."""
    metadata.create_all(engine)
    logger.info("Database schema ready (tables: %s)", ", ".join(metadata.tables))
