"""Tests for the name-based enum codec and its column type."""
from __future__ import annotations

from enum import Enum

import pytest
from sqlalchemy import select, text

from wordbank.core.enums import PronunciationType, StageWordStatus, decode_enum, encode_enum
from wordbank.db.gateway import PersistenceGateway
from wordbank.db.models import Pronunciation
from wordbank.utils.exceptions import ConstraintViolation, UnknownEnumValue


@pytest.mark.parametrize("member", [*PronunciationType, *StageWordStatus])
def test_every_member_round_trips_by_name(member: Enum) -> None:
    encoded = encode_enum(member)

    assert encoded == member.name
    assert decode_enum(type(member), encoded) is member


@pytest.mark.parametrize("raw", ["BOGUS", "sample", "Sample", "", 0, 1, None])
def test_decode_rejects_values_outside_declared_names(raw) -> None:
    with pytest.raises(UnknownEnumValue) as excinfo:
        decode_enum(PronunciationType, raw)

    assert excinfo.value.details["allowed"] == ["RECORDED", "SAMPLE"]


def test_unknown_enum_value_is_a_constraint_violation_and_value_error() -> None:
    error = UnknownEnumValue("StageWordStatus", "SKIPPED", StageWordStatus.__members__)

    assert isinstance(error, ConstraintViolation)
    assert isinstance(error, ValueError)
    assert "SKIPPED" in error.message


def test_encoding_does_not_depend_on_declaration_order() -> None:
    class Reordered(str, Enum):
        FAIL = "FAIL"
        DONE = "DONE"
        PENDING = "PENDING"

    for member in StageWordStatus:
        assert encode_enum(Reordered[member.name]) == encode_enum(member)


def test_enum_column_stores_symbolic_name(db_session, word_with_children) -> None:
    stored = db_session.execute(
        text("SELECT type FROM pronunciations WHERE id = :id"), {"id": "1"}
    ).scalar_one()
    status = db_session.execute(
        text("SELECT status FROM stage_words WHERE id = :id"), {"id": "s1"}
    ).scalar_one()

    assert stored == "SAMPLE"
    assert status == "PENDING"


def test_loading_an_unknown_stored_literal_fails(db_session, aberration) -> None:
    db_session.execute(
        text("INSERT INTO pronunciations (id, word_id, type) VALUES (:id, :word_id, :type)"),
        {"id": "corrupt", "word_id": aberration.id, "type": "WHISPERED"},
    )
    db_session.commit()

    with pytest.raises(UnknownEnumValue):
        db_session.scalars(select(Pronunciation).where(Pronunciation.id == "corrupt")).all()


def test_saving_an_unknown_literal_raises_unknown_enum_value(db_session, aberration) -> None:
    gateway = PersistenceGateway(db_session)

    with pytest.raises(UnknownEnumValue) as excinfo:
        gateway.save(Pronunciation(id="px", word=aberration, type="sample"))

    assert isinstance(excinfo.value, ConstraintViolation)
    assert gateway.find_by_id(Pronunciation, "px") is None
