from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bookshelf import db
from bookshelf.errors import SchemaError
from bookshelf.logger import get_logger


logger = get_logger(__name__)

# Columns added after the first deployment: (table, column, DDL type clause).
# The clause needs a DEFAULT so rows written before the column existed stay valid.
ADDITIVE_COLUMNS = [
    ("pages", "name", "TEXT NOT NULL DEFAULT ''"),
]


def ensure_schema():
    """Create missing tables, then add any missing post-release columns.

    Must run inside an application context. Safe to call repeatedly: existing
    tables are left as they are and columns are only added when a trial read
    shows they are missing. Nothing is ever dropped or rewritten; columns
    the models no longer declare simply stay in the table unused.

    Raises ``SchemaError`` when a table or column cannot be created.
    """
    try:
        db.create_all()
    except SQLAlchemyError as exc:
        logger.error("Failed to create tables", error=str(exc))
        raise SchemaError(f"cannot create tables: {exc}") from exc
    logger.info("Tables ensured", tables=sorted(db.metadata.tables))

    for table, column, clause in ADDITIVE_COLUMNS:
        if _column_exists(table, column):
            continue
        _add_column(table, column, clause)


def _column_exists(table, column):
    try:
        with db.engine.connect() as conn:
            conn.execute(text(f"SELECT {column} FROM {table} LIMIT 1"))
    except SQLAlchemyError:
        return False
    return True


def _add_column(table, column, clause):
    try:
        with db.engine.begin() as conn:
            conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {column} {clause}"))
    except SQLAlchemyError as exc:
        logger.error("Failed to add column", table=table, column=column, error=str(exc))
        raise SchemaError(f"cannot add column {table}.{column}: {exc}") from exc
    logger.warning("Added missing column", table=table, column=column)
