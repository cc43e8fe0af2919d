import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey

from app.db.base import Base
from app.db.models.audit import AuditMixin


class ScrapType(str, enum.Enum):
    PRODUCT = "product"
    ARTICLE = "article"
    VIDEO = "video"
    OTHER = "other"


class Scrap(AuditMixin, Base):
    __tablename__ = "scraps"

    id = Column("scrap_id", Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    dtype = Column(Enum(ScrapType, native_enum=False), nullable=False, default=ScrapType.OTHER)
    page_url = Column(String, nullable=False)
    title = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    site_name = Column(String, nullable=True)
    thumbnail_url = Column(String, nullable=True)
    price = Column(String, nullable=True)  # products only
    deleted_date = Column(DateTime, nullable=True)
