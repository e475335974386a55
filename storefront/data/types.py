# storefront/data/types.py
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text
from sqlalchemy.types import TypeDecorator

from storefront.domain.schemas import ORDER_LINES


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC datetimes on every backend.

    SQLite drops tzinfo on the way in, so naive values read back are tagged
    as UTC again.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class OrderLinesJSON(TypeDecorator):
    """List[OrderLine] in Python, JSON text in the database."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return ORDER_LINES.dump_json(value, by_alias=True).decode()

    def process_result_value(self, value, dialect):
        if value is None:
            return []
        return ORDER_LINES.validate_json(value)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
