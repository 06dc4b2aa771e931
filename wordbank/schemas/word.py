"""Pydantic schemas for word endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import Field
from sqlalchemy import inspect

from wordbank.db.models.word import Word
from wordbank.schemas.common import CamelModel, PartialUpdate
from wordbank.schemas.pronunciation import PronunciationRead
from wordbank.schemas.stage_word import StageWordRead

CHILD_SCHEMAS = {
    "pronunciations": PronunciationRead,
    "stage_words": StageWordRead,
}


class WordBase(CamelModel):
    """Shared properties of word representations."""

    word_name: str = Field(min_length=1, max_length=255)
    definition: Optional[str] = None
    phonetic_spelling: Optional[str] = Field(default=None, max_length=255)
    sentence: Optional[str] = None
    is_active: bool = True
    level: int = Field(default=1, ge=0)


class WordCreate(WordBase):
    """Schema for word creation; the identifier is chosen by the client."""

    id: str = Field(min_length=1, max_length=64)


class WordUpdate(PartialUpdate):
    """Schema for partial updates to a word."""

    non_nullable = ("word_name", "is_active", "level")

    word_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    definition: Optional[str] = None
    phonetic_spelling: Optional[str] = Field(default=None, max_length=255)
    sentence: Optional[str] = None
    is_active: Optional[bool] = None
    level: Optional[int] = Field(default=None, ge=0)


class WordRead(WordBase):
    """Word response; child collections appear only once resolved."""

    id: str
    pronunciations: Optional[list[PronunciationRead]] = None
    stage_words: Optional[list[StageWordRead]] = None

    @classmethod
    def from_entity(cls, word: Word) -> "WordRead":
        """Build a response without triggering lazy loads of children."""

        data = {
            "id": word.id,
            "word_name": word.word_name,
            "definition": word.definition,
            "phonetic_spelling": word.phonetic_spelling,
            "sentence": word.sentence,
            "is_active": word.is_active,
            "level": word.level,
        }
        unloaded = inspect(word).unloaded
        for attribute, schema in CHILD_SCHEMAS.items():
            if attribute in unloaded:
                continue
            data[attribute] = [schema.model_validate(child) for child in getattr(word, attribute)]
        return cls.model_validate(data)


class WordListResponse(CamelModel):
    """Paginated word response payload."""

    total: int
    items: list[WordRead]
