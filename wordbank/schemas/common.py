"""Shared schema configuration and enum field types."""
from __future__ import annotations

from functools import partial
from typing import Annotated, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

from wordbank.core.enums import PronunciationType, StageWordStatus, decode_enum, encode_enum


class CamelModel(BaseModel):
    """Base schema exposing camelCase keys and accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialUpdate(CamelModel):
    """Base for PATCH payloads: at least one field, no nulls on required columns."""

    non_nullable: ClassVar[tuple[str, ...]] = ()

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_fields(self) -> "PartialUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        fields = type(self).model_fields
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{fields[name].alias or name} cannot be null")
        return self


PronunciationTypeField = Annotated[
    PronunciationType,
    BeforeValidator(partial(decode_enum, PronunciationType)),
    PlainSerializer(encode_enum, return_type=str, when_used="json"),
]

StageWordStatusField = Annotated[
    StageWordStatus,
    BeforeValidator(partial(decode_enum, StageWordStatus)),
    PlainSerializer(encode_enum, return_type=str, when_used="json"),
]
