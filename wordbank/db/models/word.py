"""Word aggregate root."""
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wordbank.db.base import Base, KeyedEntity


class Word(KeyedEntity, Base):
    """A vocabulary entry owning its pronunciations and learning stages."""

    __tablename__ = "words"

    id = Column(String(64), primary_key=True)
    word_name = Column(String(255), nullable=False, index=True)
    definition = Column(Text)
    phonetic_spelling = Column(String(255))
    sentence = Column(Text)
    is_active = Column(Boolean, nullable=False, default=True)
    level = Column(Integer, nullable=False, default=1, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Children are loaded on first access only; the child FK is authoritative.
    pronunciations = relationship(
        "Pronunciation",
        back_populates="word",
        cascade="all, delete-orphan",
        lazy="select",
        order_by="Pronunciation.id",
    )
    stage_words = relationship(
        "StageWord",
        back_populates="word",
        cascade="all, delete-orphan",
        lazy="select",
        order_by="StageWord.id",
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Word id={self.id!r} word_name={self.word_name!r} level={self.level!r}>"
