"""Tests for word/child associations, cascades and explicit resolution."""
from __future__ import annotations

import pytest
from sqlalchemy import func, inspect, insert, select
from sqlalchemy.exc import OperationalError

from wordbank.core.enums import PronunciationType, StageWordStatus
from wordbank.db.gateway import PersistenceGateway
from wordbank.db.models import Pronunciation, StageWord, Word
from wordbank.services.children import PronunciationService
from wordbank.services.words import WordService
from wordbank.utils.exceptions import ConstraintViolation, DataAccessError


def count(db_session, model) -> int:
    return db_session.scalar(select(func.count()).select_from(model))


def test_associated_child_is_resolved_exactly_once(db_session) -> None:
    gateway = PersistenceGateway(db_session)
    word = Word(id="w-ephemeral", word_name="ephemeral", level=2)
    pronunciation = Pronunciation(id="p1", type=PronunciationType.RECORDED, audio_duration=3)

    pronunciation.word = word
    gateway.save(word)
    gateway.save(pronunciation)

    resolved = WordService(db_session).resolve_pronunciations(gateway.find_by_id(Word, "w-ephemeral"))

    assert [child.id for child in resolved] == ["p1"]
    assert resolved.count(pronunciation) == 1
    assert gateway.find_by_id(Pronunciation, "p1").word_id == "w-ephemeral"


def test_persisting_child_without_word_is_rejected(db_session) -> None:
    gateway = PersistenceGateway(db_session)

    with pytest.raises(ConstraintViolation):
        gateway.save(Pronunciation(id="orphan", type=PronunciationType.SAMPLE))

    with pytest.raises(ConstraintViolation):
        gateway.save(StageWord(id="orphan-stage", status=StageWordStatus.PENDING))

    assert gateway.find_by_id(Pronunciation, "orphan") is None
    assert gateway.find_by_id(StageWord, "orphan-stage") is None


def test_fetching_a_word_leaves_children_unresolved(db_session, word_with_children) -> None:
    word = WordService(db_session).get(word_with_children.id)

    state = inspect(word)
    assert "pronunciations" in state.unloaded
    assert "stage_words" in state.unloaded


def test_resolution_is_recomputed_from_foreign_keys(db_session, word_with_children) -> None:
    service = WordService(db_session)
    word = service.get(word_with_children.id)
    assert [p.id for p in service.resolve_pronunciations(word)] == ["1", "2"]

    db_session.execute(
        insert(Pronunciation.__table__).values(id="3", word_id=word.id, type=PronunciationType.SAMPLE)
    )

    assert [p.id for p in service.resolve_pronunciations(word)] == ["1", "2", "3"]
    assert [p.id for p in word.pronunciations] == ["1", "2", "3"]


def test_resolution_failure_surfaces_after_successful_fetch(
    db_session, word_with_children, monkeypatch
) -> None:
    service = WordService(db_session)
    word = service.get(word_with_children.id)

    def unavailable(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database unavailable"))

    monkeypatch.setattr(db_session, "scalars", unavailable)

    with pytest.raises(DataAccessError):
        service.resolve_pronunciations(word)
    with pytest.raises(DataAccessError):
        service.resolve_stage_words(word)


def test_deleting_word_cascades_to_children(db_session, word_with_children) -> None:
    WordService(db_session).delete(word_with_children.id)

    assert count(db_session, Word) == 0
    assert count(db_session, Pronunciation) == 0
    assert count(db_session, StageWord) == 0


def test_attach_moves_child_between_words(db_session, word_with_children) -> None:
    gateway = PersistenceGateway(db_session)
    gateway.save(Word(id="w-other", word_name="anomaly", level=2))
    words = WordService(db_session, gateway)

    PronunciationService(db_session, gateway).attach("1", "w-other")

    assert [p.id for p in words.resolve_pronunciations(words.get(word_with_children.id))] == ["2"]
    assert [p.id for p in words.resolve_pronunciations(words.get("w-other"))] == ["1"]


def test_attach_to_missing_word_is_rejected(db_session, word_with_children) -> None:
    with pytest.raises(ConstraintViolation):
        PronunciationService(db_session).attach("1", "does-not-exist")


def test_removing_child_from_collection_deletes_it(db_session, word_with_children) -> None:
    service = WordService(db_session)
    word = service.get(word_with_children.id)
    pronunciations = service.resolve_pronunciations(word)

    word.pronunciations.remove(pronunciations[0])
    service.gateway.save(word)

    assert count(db_session, Pronunciation) == 1
    assert db_session.get(Pronunciation, "1") is None


def test_entities_compare_by_identifier() -> None:
    assert Word(id="a", word_name="one") == Word(id="a", word_name="two")
    assert Word(id="a", word_name="one") != Word(id="b", word_name="one")
    assert Word(id="a", word_name="one") != Pronunciation(id="a")
    assert len({StageWord(id="s"), StageWord(id="s")}) == 1
    word = Word(word_name="draft")
    assert word == word
    assert Word(word_name="draft") != Word(word_name="draft")


def test_constraint_failure_names_the_entity(db_session, word_with_children) -> None:
    gateway = PersistenceGateway(db_session)
    pronunciation = gateway.find_by_id(Pronunciation, "1")
    pronunciation.type = None

    with pytest.raises(ConstraintViolation) as excinfo:
        gateway.save(pronunciation)

    assert "Pronunciation '1'" in excinfo.value.message


def test_failed_resolution_leaves_session_usable(db_session, word_with_children) -> None:
    service = WordService(db_session)
    word = service.get(word_with_children.id)
    db_session.add(Pronunciation(id="dangling", type=PronunciationType.SAMPLE))

    with pytest.raises(DataAccessError):
        service.resolve_pronunciations(word)

    assert service.get(word_with_children.id).word_name == "aberration"
    assert count(db_session, Pronunciation) == 2
