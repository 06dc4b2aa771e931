"""API router for version 1."""
from fastapi import APIRouter

from wordbank.api.v1.endpoints import pronunciations, stage_words, words


api_router = APIRouter()
api_router.include_router(words.router)
api_router.include_router(pronunciations.router)
api_router.include_router(stage_words.router)
