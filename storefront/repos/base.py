# storefront/repos/base.py
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.domain.errors import StoreError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def store_errors(func):
    """Roll the session back and re-raise any SQLAlchemy failure as StoreError."""

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"{type(self).__name__}.{func.__name__} failed: {e}")
            self.db.rollback()
            raise StoreError("Storage operation failed") from e

    return wrapper


class BaseRepo:
    def __init__(self, db: Session):
        self.db = db

    @store_errors
    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
