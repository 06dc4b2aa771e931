"""FastAPI application factory."""
from __future__ import annotations

import sys
from typing import Callable, List

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from wordbank.api.v1 import api_router
from wordbank.config import settings
from wordbank.utils.exceptions import (
    ConstraintViolation,
    DataAccessError,
    EntityExistsError,
    EntityNotFoundError,
    WordbankException,
    handle_constraint_violation,
    handle_data_access_error,
    handle_entity_exists,
    handle_not_found,
)


tags_metadata: List[dict[str, str]] = [
    {"name": "words", "description": "Manage vocabulary words and resolve their children."},
    {"name": "pronunciations", "description": "Audio pronunciations owned by a word."},
    {"name": "stage-words", "description": "Learning stage records owned by a word."},
]

ERROR_HANDLERS: dict[type[WordbankException], Callable[..., HTTPException]] = {
    ConstraintViolation: handle_constraint_violation,
    EntityExistsError: handle_entity_exists,
    EntityNotFoundError: handle_not_found,
    DataAccessError: handle_data_access_error,
}


def configure_logging() -> None:
    """Route loguru output to stderr at the configured level."""

    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""

    configure_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Vocabulary words with their pronunciations and learning stages.",
        version="0.1.0",
        openapi_tags=tags_metadata,
        docs_url=f"{settings.API_V1_STR}/docs",
        redoc_url=f"{settings.API_V1_STR}/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors()), "message": "Validation failed"},
        )

    @app.exception_handler(WordbankException)
    async def domain_exception_handler(request: Request, exc: WordbankException) -> JSONResponse:
        for error_type in type(exc).__mro__:
            handler = ERROR_HANDLERS.get(error_type)
            if handler is not None:
                http_exc = handler(exc)
                return JSONResponse(
                    status_code=http_exc.status_code,
                    content={"detail": jsonable_encoder(http_exc.detail)},
                )
        logger.error(f"Unhandled application error: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.message},
        )

    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
