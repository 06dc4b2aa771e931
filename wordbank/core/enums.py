"""Fixed-value fields and their name-based codec.

Enum members are always stored and transmitted by ``name``. Declaration order
carries no meaning, so inserting or reordering members never changes what an
existing row or payload decodes to.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Type, TypeVar

from wordbank.utils.exceptions import UnknownEnumValue

E = TypeVar("E", bound=Enum)


class PronunciationType(str, Enum):
    """Origin of a pronunciation recording."""

    RECORDED = "RECORDED"
    SAMPLE = "SAMPLE"


class StageWordStatus(str, Enum):
    """Learning stage outcome for a word."""

    DONE = "DONE"
    PENDING = "PENDING"
    FAIL = "FAIL"


def encode_enum(member: Enum) -> str:
    """Return the symbolic name used in storage and on the wire."""

    return member.name


def decode_enum(enum_class: Type[E], raw: Any) -> E:
    """Decode ``raw`` into a member of ``enum_class`` by exact name.

    Members pass through unchanged. Anything else, including ordinals and
    differently cased names, raises ``UnknownEnumValue``.
    """

    if isinstance(raw, enum_class):
        return raw
    if isinstance(raw, str):
        member = enum_class.__members__.get(raw)
        if member is not None:
            return member
    raise UnknownEnumValue(enum_class.__name__, raw, enum_class.__members__)
