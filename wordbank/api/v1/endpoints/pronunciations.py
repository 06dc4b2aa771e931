"""Pronunciation endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from wordbank.api import deps
from wordbank.schemas import (
    PronunciationCreate,
    PronunciationRead,
    PronunciationUpdate,
    WordReference,
)
from wordbank.services.children import PronunciationService

router = APIRouter(prefix="/pronunciations", tags=["pronunciations"])


@router.post("/", response_model=PronunciationRead, status_code=status.HTTP_201_CREATED)
def create_pronunciation(
    payload: PronunciationCreate,
    service: PronunciationService = Depends(deps.get_pronunciation_service),
) -> PronunciationRead:
    """Create a pronunciation; it must reference an existing word to be stored."""

    return service.create(payload)


@router.get("/{pronunciation_id}", response_model=PronunciationRead)
def get_pronunciation(
    pronunciation_id: str,
    service: PronunciationService = Depends(deps.get_pronunciation_service),
) -> PronunciationRead:
    return service.get(pronunciation_id)


@router.patch("/{pronunciation_id}", response_model=PronunciationRead)
def update_pronunciation(
    pronunciation_id: str,
    payload: PronunciationUpdate,
    service: PronunciationService = Depends(deps.get_pronunciation_service),
) -> PronunciationRead:
    return service.update(pronunciation_id, payload)


@router.put("/{pronunciation_id}/word", response_model=PronunciationRead)
def attach_pronunciation(
    pronunciation_id: str,
    payload: WordReference,
    service: PronunciationService = Depends(deps.get_pronunciation_service),
) -> PronunciationRead:
    """Attach the pronunciation to a word, moving it if it had another owner."""

    return service.attach(pronunciation_id, payload.word_id)


@router.delete("/{pronunciation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pronunciation(
    pronunciation_id: str,
    service: PronunciationService = Depends(deps.get_pronunciation_service),
) -> None:
    service.delete(pronunciation_id)
