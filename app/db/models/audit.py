from datetime import datetime

from sqlalchemy import Column, DateTime


class AuditMixin:
    """Created/modified timestamps shared by every table."""

    created_date = Column(DateTime, nullable=False, default=datetime.now)
    modified_date = Column(
        DateTime, nullable=False, default=datetime.now, onupdate=datetime.now
    )

    def touch(self, now: datetime | None = None) -> None:
        self.modified_date = now or datetime.now()
