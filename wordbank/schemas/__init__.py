"""Pydantic schemas package."""

from wordbank.schemas.attach import WordReference
from wordbank.schemas.pronunciation import (
    PronunciationCreate,
    PronunciationRead,
    PronunciationUpdate,
)
from wordbank.schemas.stage_word import StageWordCreate, StageWordRead, StageWordUpdate
from wordbank.schemas.word import WordCreate, WordListResponse, WordRead, WordUpdate

__all__ = [
    "WordReference",
    "PronunciationCreate",
    "PronunciationRead",
    "PronunciationUpdate",
    "StageWordCreate",
    "StageWordRead",
    "StageWordUpdate",
    "WordCreate",
    "WordListResponse",
    "WordRead",
    "WordUpdate",
]
