"""Database models package."""
from wordbank.db.models.word import Word
from wordbank.db.models.pronunciation import Pronunciation
from wordbank.db.models.stage_word import StageWord

__all__ = [
    "Word",
    "Pronunciation",
    "StageWord",
]
