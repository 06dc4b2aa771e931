"""Per-word learning stage records."""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from wordbank.core.enums import StageWordStatus
from wordbank.db.base import Base, KeyedEntity
from wordbank.db.types import SymbolicEnum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StageWord(KeyedEntity, Base):
    """Tracks how far a word has progressed through a listening stage."""

    __tablename__ = "stage_words"

    id = Column(String(64), primary_key=True)
    word_id = Column(
        String(64), ForeignKey("words.id", ondelete="CASCADE"), nullable=False, index=True
    )

    status = Column(SymbolicEnum(StageWordStatus), nullable=False, default=StageWordStatus.PENDING)
    listened_qty = Column(Integer, nullable=False, default=0)
    last_updated_date_time = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    word = relationship("Word", back_populates="stage_words")

    def record_listen(self, when: datetime | None = None) -> None:
        """Count one more listen and stamp the update time."""

        self.listened_qty = (self.listened_qty or 0) + 1
        self.last_updated_date_time = when or utcnow()

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<StageWord id={self.id!r} word_id={self.word_id!r} status={self.status!r}>"
