"""Stage word endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from wordbank.api import deps
from wordbank.schemas import StageWordCreate, StageWordRead, StageWordUpdate, WordReference
from wordbank.services.children import StageWordService

router = APIRouter(prefix="/stage-words", tags=["stage-words"])


@router.post("/", response_model=StageWordRead, status_code=status.HTTP_201_CREATED)
def create_stage_word(
    payload: StageWordCreate,
    service: StageWordService = Depends(deps.get_stage_word_service),
) -> StageWordRead:
    """Create a stage word; it must reference an existing word to be stored."""

    return service.create(payload)


@router.get("/{stage_word_id}", response_model=StageWordRead)
def get_stage_word(
    stage_word_id: str,
    service: StageWordService = Depends(deps.get_stage_word_service),
) -> StageWordRead:
    return service.get(stage_word_id)


@router.patch("/{stage_word_id}", response_model=StageWordRead)
def update_stage_word(
    stage_word_id: str,
    payload: StageWordUpdate,
    service: StageWordService = Depends(deps.get_stage_word_service),
) -> StageWordRead:
    """Update the status or listen counter of a stage word."""

    return service.update(stage_word_id, payload)


@router.post("/{stage_word_id}/listens", response_model=StageWordRead)
def record_stage_word_listen(
    stage_word_id: str,
    service: StageWordService = Depends(deps.get_stage_word_service),
) -> StageWordRead:
    """Count one listen of the word at this stage."""

    return service.record_listen(stage_word_id)


@router.put("/{stage_word_id}/word", response_model=StageWordRead)
def attach_stage_word(
    stage_word_id: str,
    payload: WordReference,
    service: StageWordService = Depends(deps.get_stage_word_service),
) -> StageWordRead:
    return service.attach(stage_word_id, payload.word_id)


@router.delete("/{stage_word_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_stage_word(
    stage_word_id: str,
    service: StageWordService = Depends(deps.get_stage_word_service),
) -> None:
    service.delete(stage_word_id)
