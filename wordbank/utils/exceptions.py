"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Iterable, Optional

from fastapi import HTTPException, status
from loguru import logger


class WordbankException(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConstraintViolation(WordbankException):
    """A write would break an integrity rule of the data model."""


class UnknownEnumValue(ConstraintViolation, ValueError):
    """A stored or received enum literal is outside the declared set."""

    def __init__(self, enum_name: str, value: Any, allowed: Iterable[str]):
        allowed = list(allowed)
        super().__init__(
            f"{value!r} is not a valid {enum_name}; expected one of {', '.join(allowed)}",
            details={"enum": enum_name, "value": value, "allowed": allowed},
        )


class EntityExistsError(WordbankException):
    """An entity with the supplied identifier is already stored."""


class EntityNotFoundError(WordbankException):
    """A requested entity does not exist."""


class DataAccessError(WordbankException):
    """The database could not be reached or the operation failed."""


def handle_constraint_violation(error: ConstraintViolation) -> HTTPException:
    """Handle integrity and enum validation failures."""
    logger.warning(f"Constraint violation: {error.message}")
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={
            "message": error.message,
            "details": error.details
        }
    )


def handle_entity_exists(error: EntityExistsError) -> HTTPException:
    """Handle duplicate identifiers."""
    logger.warning(f"Duplicate entity: {error.message}")
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=error.message
    )


def handle_not_found(error: EntityNotFoundError) -> HTTPException:
    """Handle missing entities."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=error.message
    )


def handle_data_access_error(error: DataAccessError) -> HTTPException:
    """Handle database errors and return appropriate HTTP response."""
    logger.error(f"Data access error: {error.message}")
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Database operation failed. Please try again later."
    )
