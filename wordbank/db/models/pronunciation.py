"""Pronunciation recordings attached to a word."""
from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from wordbank.core.enums import PronunciationType
from wordbank.db.base import Base, KeyedEntity
from wordbank.db.types import SymbolicEnum


class Pronunciation(KeyedEntity, Base):
    """Audio pronunciation of a word."""

    __tablename__ = "pronunciations"

    id = Column(String(64), primary_key=True)
    word_id = Column(
        String(64), ForeignKey("words.id", ondelete="CASCADE"), nullable=False, index=True
    )

    audio_description = Column(Text)
    audio_url = Column(String(1024))
    audio_duration = Column(Integer)
    audio_size = Column(Integer)
    definition = Column(Text)
    phonetic_spelling = Column(String(255))
    speaker_gender = Column(String(20))
    type = Column(SymbolicEnum(PronunciationType), nullable=False, default=PronunciationType.RECORDED)

    word = relationship("Word", back_populates="pronunciations")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Pronunciation id={self.id!r} word_id={self.word_id!r} type={self.type!r}>"
