"""Service layer for entities owned by a word."""
from __future__ import annotations

from typing import Any, ClassVar, Generic, Optional, Type, TypeVar

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.orm import Session

from wordbank.db.gateway import PersistenceGateway
from wordbank.db.models import Pronunciation, StageWord, Word
from wordbank.schemas.pronunciation import PronunciationCreate
from wordbank.schemas.stage_word import StageWordCreate
from wordbank.utils.exceptions import (
    ConstraintViolation,
    EntityExistsError,
    EntityNotFoundError,
)

ChildT = TypeVar("ChildT", Pronunciation, StageWord)


class ChildEntityService(Generic[ChildT]):
    """Lifecycle of a child entity whose ``word`` reference owns the association.

    A child may be built without a word, but ``save`` only succeeds once the
    reference is set: the non-null foreign key rejects it otherwise.
    """

    model: ClassVar[Type[Any]]

    def __init__(self, db: Session, gateway: Optional[PersistenceGateway] = None):
        self.db = db
        self.gateway = gateway or PersistenceGateway(db)

    @property
    def label(self) -> str:
        return self.model.__name__

    def build(self, payload: BaseModel) -> ChildT:
        """Construct an unsaved child from ``payload``; no relationship checks."""

        fields = payload.model_dump(exclude={"word_id"}, exclude_none=True)
        return self.model(**fields)

    def create(self, payload: PronunciationCreate | StageWordCreate) -> ChildT:
        """Persist a new child, attached to ``payload.word_id`` when given."""

        if self.gateway.find_by_id(self.model, payload.id) is not None:
            raise EntityExistsError(f"{self.label} {payload.id!r} already exists")

        child = self.build(payload)
        if payload.word_id is not None:
            child.word = self._require_word(payload.word_id)
        self.gateway.save(child)
        logger.info(f"Created {self.label} {child.id!r} for word {child.word_id!r}")
        return child

    def get(self, child_id: str) -> ChildT:
        child = self.gateway.find_by_id(self.model, child_id)
        if child is None:
            raise EntityNotFoundError(f"{self.label} {child_id!r} not found")
        return child

    def update(self, child_id: str, payload: BaseModel) -> ChildT:
        child = self.get(child_id)
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(child, field, value)
        return self.gateway.save(child)

    def attach(self, child_id: str, word_id: str) -> ChildT:
        """Point the child at ``word_id``, moving it away from any previous word."""

        child = self.get(child_id)
        previous = child.word_id
        child.word = self._require_word(word_id)
        self.gateway.save(child)
        logger.info(f"Attached {self.label} {child_id!r} to word {word_id!r} (was {previous!r})")
        return child

    def delete(self, child_id: str) -> None:
        child = self.get(child_id)
        self.gateway.delete(child)

    def _require_word(self, word_id: str) -> Word:
        word = self.gateway.find_by_id(Word, word_id)
        if word is None:
            raise ConstraintViolation(
                f"{self.label} must reference an existing word; {word_id!r} does not exist",
                details={"word_id": word_id},
            )
        return word


class PronunciationService(ChildEntityService[Pronunciation]):
    """Pronunciations of a word."""

    model = Pronunciation


class StageWordService(ChildEntityService[StageWord]):
    """Learning stage records of a word."""

    model = StageWord

    def record_listen(self, stage_word_id: str) -> StageWord:
        """Increment the listen counter of a stage word."""

        stage_word = self.get(stage_word_id)
        stage_word.record_listen()
        return self.gateway.save(stage_word)
