"""Word endpoints."""
from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from wordbank.api import deps
from wordbank.schemas import (
    PronunciationRead,
    StageWordRead,
    WordCreate,
    WordListResponse,
    WordRead,
    WordUpdate,
)
from wordbank.services.words import WordService

router = APIRouter(prefix="/words", tags=["words"])

Include = Literal["pronunciations", "stageWords"]


@router.post(
    "/",
    response_model=WordRead,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_word(
    payload: WordCreate, service: WordService = Depends(deps.get_word_service)
) -> WordRead:
    """Create a word under the identifier supplied by the client."""

    word = service.create(payload)
    return WordRead.from_entity(word)


@router.get("/", response_model=WordListResponse, response_model_exclude_unset=True)
def list_words(
    is_active: bool | None = Query(default=None, alias="isActive"),
    level: int | None = Query(default=None, ge=0),
    limit: int = Query(default=25, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    service: WordService = Depends(deps.get_word_service),
) -> WordListResponse:
    """Return words ordered by identifier; child collections are not resolved."""

    items, total = service.list_words(is_active=is_active, level=level, limit=limit, offset=offset)
    return WordListResponse(total=total, items=[WordRead.from_entity(word) for word in items])


@router.get("/{word_id}", response_model=WordRead, response_model_exclude_unset=True)
def get_word(
    word_id: str,
    include: list[Include] = Query(default=[], description="Child collections to resolve"),
    service: WordService = Depends(deps.get_word_service),
) -> WordRead:
    """Retrieve a word, resolving only the collections named in ``include``."""

    word = service.get(word_id)
    if "pronunciations" in include:
        service.resolve_pronunciations(word)
    if "stageWords" in include:
        service.resolve_stage_words(word)
    return WordRead.from_entity(word)


@router.patch("/{word_id}", response_model=WordRead, response_model_exclude_unset=True)
def update_word(
    word_id: str,
    payload: WordUpdate,
    service: WordService = Depends(deps.get_word_service),
) -> WordRead:
    """Update word attributes."""

    word = service.update(word_id, payload)
    return WordRead.from_entity(word)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_word(word_id: str, service: WordService = Depends(deps.get_word_service)) -> None:
    """Delete a word and everything it owns."""

    service.delete(word_id)


@router.get("/{word_id}/pronunciations", response_model=list[PronunciationRead])
def list_word_pronunciations(
    word_id: str, service: WordService = Depends(deps.get_word_service)
) -> list[PronunciationRead]:
    word = service.get(word_id)
    return service.resolve_pronunciations(word)


@router.get("/{word_id}/stage-words", response_model=list[StageWordRead])
def list_word_stage_words(
    word_id: str, service: WordService = Depends(deps.get_word_service)
) -> list[StageWordRead]:
    word = service.get(word_id)
    return service.resolve_stage_words(word)
