"""Generic persistence operations over a SQLAlchemy session.

The gateway is the only place that talks to the session directly. It owns
the commit/rollback boundary for a single unit of work and translates
SQLAlchemy failures into :class:`ConstraintViolation` and
:class:`DataAccessError` so callers never handle driver exceptions.
"""
from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from loguru import logger
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from wordbank.utils.exceptions import ConstraintViolation, DataAccessError, WordbankException

T = TypeVar("T")


def _describe(entity: Any) -> str:
    identity = inspect(entity).identity
    entity_id = vars(entity).get("id", identity[0] if identity else None)
    return f"{type(entity).__name__} {entity_id!r}"


def _domain_error(exc: SQLAlchemyError) -> Optional[WordbankException]:
    """Return the application error a type processor raised inside a statement."""
    orig = getattr(exc, "orig", None)
    return orig if isinstance(orig, WordbankException) else None


class PersistenceGateway:
    """Save, look up, delete and resolve child collections of entities."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, entity: T) -> T:
        """Persist ``entity`` (and anything it cascades to) in one commit."""

        label = _describe(entity)
        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(f"Integrity failure saving {label}: {exc.orig}")
            raise ConstraintViolation(
                f"Could not persist {label}: integrity constraint failed",
                details={"entity": type(entity).__name__, "reason": str(exc.orig)},
            ) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            domain_error = _domain_error(exc)
            if domain_error is not None:
                raise domain_error from None
            raise DataAccessError(f"Could not persist {label}") from exc
        try:
            self.db.refresh(entity)
        except SQLAlchemyError as exc:
            raise DataAccessError(f"Could not reload {label}") from exc
        return entity

    def find_by_id(self, model: Type[T], entity_id: Any) -> Optional[T]:
        """Return the entity with ``entity_id`` or ``None`` when absent."""

        try:
            return self.db.get(model, entity_id)
        except SQLAlchemyError as exc:
            raise DataAccessError(f"Could not load {model.__name__} {entity_id!r}") from exc

    def delete(self, entity: Any) -> None:
        """Delete ``entity``; owned children follow through cascade rules."""

        label = _describe(entity)
        try:
            self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            domain_error = _domain_error(exc)
            if domain_error is not None:
                raise domain_error from None
            raise DataAccessError(f"Could not delete {label}") from exc

    def list_all(self, model: Type[T], *criteria: Any, limit: int = 50, offset: int = 0) -> list[T]:
        """Return a page of ``model`` rows matching ``criteria`` ordered by id."""

        stmt = select(model).where(*criteria).order_by(model.id).offset(offset).limit(limit)
        try:
            return list(self.db.scalars(stmt))
        except SQLAlchemyError as exc:
            raise DataAccessError(f"Could not list {model.__name__}") from exc

    def count(self, model: Type[T], *criteria: Any) -> int:
        """Return the number of ``model`` rows matching ``criteria``."""

        stmt = select(func.count()).select_from(model).where(*criteria)
        try:
            return int(self.db.scalar(stmt) or 0)
        except SQLAlchemyError as exc:
            raise DataAccessError(f"Could not count {model.__name__}") from exc

    def resolve_children(self, parent: Any, attribute: str) -> list:
        """Materialize ``parent.<attribute>`` from the children's foreign keys.

        The collection is recomputed from every child row whose foreign key
        equals the parent's id and installed as the loaded value, so later
        serialization sees it without issuing further queries. Failures
        surface as ``DataAccessError`` even when ``parent`` itself was loaded
        successfully earlier.
        """

        relationship = inspect(type(parent)).relationships[attribute]
        child_model = relationship.mapper.class_
        (foreign_key,) = relationship.remote_side
        label = _describe(parent)
        try:
            self.db.flush()
            stmt = (
                select(child_model)
                .where(foreign_key == parent.id)
                .order_by(*relationship.mapper.primary_key)
            )
            children = list(self.db.scalars(stmt))
        except SQLAlchemyError as exc:
            self.db.rollback()
            domain_error = _domain_error(exc)
            if domain_error is not None:
                raise domain_error from None
            raise DataAccessError(
                f"Could not resolve {attribute} of {label}",
                details={"attribute": attribute},
            ) from exc
        set_committed_value(parent, attribute, children)
        return children
