"""Custom database column types."""
from __future__ import annotations

from enum import Enum
from typing import Any, Type

from sqlalchemy.types import String, TypeDecorator

from wordbank.core.enums import decode_enum, encode_enum


class SymbolicEnum(TypeDecorator):
    """Persist an ``Enum`` member as its name in a plain string column."""

    impl = String
    cache_ok = True

    def __init__(self, enum_class: Type[Enum], length: int = 32, **kwargs: Any):
        self.enum_class = enum_class
        super().__init__(length=length, **kwargs)

    def process_bind_param(self, value: Any, dialect):  # type: ignore[override]
        if value is None:
            return None
        return encode_enum(decode_enum(self.enum_class, value))

    def process_result_value(self, value: Any, dialect):  # type: ignore[override]
        if value is None:
            return None
        return decode_enum(self.enum_class, value)
