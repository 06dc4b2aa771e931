"""Service layer for word operations."""
from __future__ import annotations

from typing import Optional

from loguru import logger
from sqlalchemy.orm import Session

from wordbank.db.gateway import PersistenceGateway
from wordbank.db.models import Pronunciation, StageWord, Word
from wordbank.schemas.word import WordCreate, WordUpdate
from wordbank.utils.exceptions import EntityExistsError, EntityNotFoundError


class WordService:
    """Create, update, delete words and resolve their child collections."""

    def __init__(self, db: Session, gateway: Optional[PersistenceGateway] = None):
        self.db = db
        self.gateway = gateway or PersistenceGateway(db)

    def create(self, payload: WordCreate) -> Word:
        """Persist a new word under the client-supplied identifier."""

        if self.gateway.find_by_id(Word, payload.id) is not None:
            raise EntityExistsError(f"Word {payload.id!r} already exists")

        word = Word(**payload.model_dump())
        self.gateway.save(word)
        logger.info(f"Created word {word.id!r} ({word.word_name!r})")
        return word

    def get(self, word_id: str) -> Word:
        """Return a word by identifier or raise ``EntityNotFoundError``.

        Child collections are left unresolved.
        """

        word = self.gateway.find_by_id(Word, word_id)
        if word is None:
            raise EntityNotFoundError(f"Word {word_id!r} not found")
        return word

    def list_words(
        self,
        *,
        is_active: bool | None = None,
        level: int | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> tuple[list[Word], int]:
        """Return a page of words plus the total matching the filters."""

        criteria = []
        if is_active is not None:
            criteria.append(Word.is_active == is_active)
        if level is not None:
            criteria.append(Word.level == level)
        items = self.gateway.list_all(Word, *criteria, limit=limit, offset=offset)
        return items, self.gateway.count(Word, *criteria)

    def update(self, word_id: str, payload: WordUpdate) -> Word:
        """Apply a partial update; children are not touched."""

        word = self.get(word_id)
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(word, field, value)
        return self.gateway.save(word)

    def delete(self, word_id: str) -> None:
        """Delete a word together with every pronunciation and stage word it owns."""

        word = self.get(word_id)
        self.gateway.delete(word)
        logger.info(f"Deleted word {word_id!r} and its children")

    def resolve_pronunciations(self, word: Word) -> list[Pronunciation]:
        return self.gateway.resolve_children(word, "pronunciations")

    def resolve_stage_words(self, word: Word) -> list[StageWord]:
        return self.gateway.resolve_children(word, "stage_words")
