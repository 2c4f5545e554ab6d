from sqlalchemy import Column, DateTime
from datetime import datetime
import pytz

IST = pytz.timezone('Asia/Kolkata')


def now_ist():
    return datetime.now(IST)


class TimestampMixin:
    """Mixin that provides created/updated timestamps.

    Timestamps are timezone-aware and generated in Asia/Kolkata, the zone the
    business invoices in. DateTime(timezone=True) keeps the zone in the database.
    """
    created_at = Column(DateTime(timezone=True), default=now_ist)
    updated_at = Column(DateTime(timezone=True), onupdate=now_ist)
