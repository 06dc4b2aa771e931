"""Shared API dependencies."""
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from wordbank.db.session import get_db
from wordbank.services.children import PronunciationService, StageWordService
from wordbank.services.words import WordService

__all__ = [
    "get_db",
    "get_word_service",
    "get_pronunciation_service",
    "get_stage_word_service",
]


def get_word_service(db: Session = Depends(get_db)) -> WordService:
    return WordService(db)


def get_pronunciation_service(db: Session = Depends(get_db)) -> PronunciationService:
    return PronunciationService(db)


def get_stage_word_service(db: Session = Depends(get_db)) -> StageWordService:
    return StageWordService(db)
