"""Pydantic schemas for stage word endpoints."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from wordbank.core.enums import StageWordStatus
from wordbank.schemas.common import CamelModel, PartialUpdate, StageWordStatusField


class StageWordCreate(CamelModel):
    """Input for a new stage word."""

    id: str = Field(min_length=1, max_length=64)
    word_id: Optional[str] = Field(default=None, max_length=64)
    status: StageWordStatusField = StageWordStatus.PENDING
    listened_qty: int = Field(default=0, ge=0)
    last_updated_date_time: Optional[datetime] = None


class StageWordUpdate(PartialUpdate):
    """Partial update of a stage word's progress."""

    non_nullable = ("status", "listened_qty")

    status: Optional[StageWordStatusField] = None
    listened_qty: Optional[int] = Field(default=None, ge=0)


class StageWordRead(CamelModel):
    """Stage word as returned to clients, without its owning word."""

    id: str
    status: StageWordStatusField
    listened_qty: int
    last_updated_date_time: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
