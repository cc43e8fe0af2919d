import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship

from app.db.base import Base
from app.db.models.audit import AuditMixin


class Provider(str, enum.Enum):
    GOOGLE = "google"
    KAKAO = "kakao"


class Role(str, enum.Enum):
    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"


class User(AuditMixin, Base):
    __tablename__ = "users"

    id = Column("user_id", Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    profile_url = Column(String, nullable=True)
    provider = Column(Enum(Provider, native_enum=False), nullable=True)
    role = Column(Enum(Role, native_enum=False), nullable=False, default=Role.USER)
    deleted_date = Column(DateTime, nullable=True)

    # Boards are always queried by owner id; loading this relationship raises.
    boards = relationship("Board", back_populates="user", lazy="raise")

    def update(self, name: str, profile_url: str | None) -> "User":
        """Refresh the profile fields copied from the OAuth2 provider."""
        if self.name != name or self.profile_url != profile_url:
            self.name = name
            self.profile_url = profile_url
            self.touch()
        return self
