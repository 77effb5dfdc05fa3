from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from bookshelf import db
from bookshelf.errors import StoreError
from bookshelf.logger import get_logger


logger = get_logger(__name__)


@contextmanager
def store_operation(operation, **context):
    """Run the enclosed queries as one transaction.

    Commits on success. Any SQLAlchemy error rolls the whole block back and
    is re-raised as ``StoreError`` carrying the driver's message.
    """
    try:
        yield db.session
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        message = str(getattr(exc, "orig", None) or exc)
        logger.error("Store operation failed", operation=operation, error=message, **context)
        raise StoreError(message) from exc
