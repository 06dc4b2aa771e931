"""Payload for moving a child entity onto a word."""
from __future__ import annotations

from pydantic import Field

from wordbank.schemas.common import CamelModel


class WordReference(CamelModel):
    """Identifies the word a child should belong to."""

    word_id: str = Field(min_length=1, max_length=64)
