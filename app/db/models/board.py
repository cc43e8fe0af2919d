import enum
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Boolean,
    BigInteger,
    Enum,
    ForeignKey,
    Uuid,
    CheckConstraint,
)
from sqlalchemy.orm import relationship

from app.core.exceptions import ErrorCode, InvalidException
from app.db.base import Base
from app.db.models.audit import AuditMixin


class Tag(str, enum.Enum):
    """Category a board is filed under."""

    ENTERTAINMENT_ART = "ENTERTAINMENT_ART"
    LIFE_SHOPPING = "LIFE_SHOPPING"
    HOBBY_TRAVEL = "HOBBY_TRAVEL"
    KNOWLEDGE_TREND = "KNOWLEDGE_TREND"

    @property
    def label(self) -> str:
        return _TAG_LABELS[self]

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Tag":
        for tag in cls:
            if tag.value == code:
                return tag
        raise InvalidException(ErrorCode.INVALID_TAG)


_TAG_LABELS = {
    Tag.ENTERTAINMENT_ART: "Entertainment & Art",
    Tag.LIFE_SHOPPING: "Life, Tips & Shopping",
    Tag.HOBBY_TRAVEL: "Hobby, Leisure & Travel",
    Tag.KNOWLEDGE_TREND: "Knowledge & Trends",
}


class Board(AuditMixin, Base):
    __tablename__ = "boards"

    id = Column("board_id", Integer, primary_key=True, index=True)
    uuid = Column(Uuid, nullable=False, unique=True, default=uuid.uuid4)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    tag = Column(Enum(Tag, native_enum=False), nullable=False)
    contents = Column(Text, nullable=True)
    heart_cnt = Column(BigInteger, nullable=False, default=0)
    is_public = Column(Boolean, nullable=False, default=False)
    is_shared = Column(Boolean, nullable=False, default=False)
    fixed_date = Column(DateTime, nullable=True)
    deleted_date = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="boards", lazy="raise")

    __table_args__ = (CheckConstraint("heart_cnt >= 0", name="ck_boards_heart_cnt"),)

    @property
    def is_fixed(self) -> bool:
        return self.fixed_date is not None

    def has_same_values(self, tag: Tag, title: str, description: Optional[str]) -> bool:
        return (
            self.tag == tag
            and self.title == title
            and self.description == description
        )

    def update(self, tag: Tag, title: str, description: Optional[str]) -> None:
        self.tag = tag
        self.title = title
        self.description = description
        self.touch()

    def has_same_contents(self, contents: Optional[str]) -> bool:
        return self.contents == contents

    def update_contents(self, contents: Optional[str]) -> None:
        self.contents = contents
        self.touch()

    def toggle_fixed(self, now: Optional[datetime] = None) -> None:
        """Pin the board, or unpin it if it is already pinned."""
        if self.fixed_date is None:
            self.fixed_date = now or datetime.now()
        else:
            self.fixed_date = None
        self.touch(now)

    def delete(self, now: Optional[datetime] = None) -> None:
        self.deleted_date = now or datetime.now()
        self.touch(now)
