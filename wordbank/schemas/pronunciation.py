"""Pydantic schemas for pronunciation endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from wordbank.core.enums import PronunciationType
from wordbank.schemas.common import CamelModel, PartialUpdate, PronunciationTypeField


class PronunciationBase(CamelModel):
    """Shared pronunciation attributes."""

    audio_description: Optional[str] = None
    audio_url: Optional[str] = Field(default=None, max_length=1024)
    audio_duration: Optional[int] = Field(default=None, ge=0)
    audio_size: Optional[int] = Field(default=None, ge=0)
    definition: Optional[str] = None
    phonetic_spelling: Optional[str] = Field(default=None, max_length=255)
    speaker_gender: Optional[str] = Field(default=None, max_length=20)
    type: PronunciationTypeField = PronunciationType.RECORDED


class PronunciationCreate(PronunciationBase):
    """Input for a new pronunciation; ``word_id`` may be supplied later."""

    id: str = Field(min_length=1, max_length=64)
    word_id: Optional[str] = Field(default=None, max_length=64)


class PronunciationUpdate(PartialUpdate):
    """Partial update of pronunciation attributes."""

    non_nullable = ("type",)

    audio_description: Optional[str] = None
    audio_url: Optional[str] = Field(default=None, max_length=1024)
    audio_duration: Optional[int] = Field(default=None, ge=0)
    audio_size: Optional[int] = Field(default=None, ge=0)
    definition: Optional[str] = None
    phonetic_spelling: Optional[str] = Field(default=None, max_length=255)
    speaker_gender: Optional[str] = Field(default=None, max_length=20)
    type: Optional[PronunciationTypeField] = None


class PronunciationRead(PronunciationBase):
    """Pronunciation as returned to clients, without its owning word."""

    id: str

    model_config = ConfigDict(from_attributes=True)
