"""
Shared manager behaviour: id lookups that fail loudly, reference resolution
through sibling managers, and field validation helpers.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Generic, List, Optional, Type, TypeVar

from taskboard.db.repositories.base import Store
from taskboard.db.schemas import Ref
from taskboard.errors import NotFound, ValidationFailure

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
EnumT = TypeVar("EnumT", bound=Enum)


class Manager(Generic[ModelT]):
    """Wraps one store; every read by id either returns a row or raises ``NotFound``."""

    def __init__(self, store: Store):
        self.store = store

    @property
    def kind(self) -> str:
        return self.store.kind

    def get_all(self) -> List[ModelT]:
        return self.store.find_all()

    def get_by_id(self, ident: int) -> ModelT:
        row = self.store.find_by_id(ident)
        if row is None:
            logger.debug("%s %s not found", self.kind, ident)
            raise NotFound(self.kind, ident)
        return row

    def _get_for_write(self, ident: int) -> ModelT:
        row = self.store.find_by_id(ident, lock=True)
        if row is None:
            logger.debug("%s %s not found for write", self.kind, ident)
            raise NotFound(self.kind, ident)
        return row

    def delete(self, ident: int) -> None:
        self.get_by_id(ident)
        self.store.delete_by_id(ident)
        logger.info("Deleted %s %s", self.kind, ident)

    # Helpers for subclasses

    @staticmethod
    def _resolve(manager: "Manager", ref: Optional[Ref]) -> Optional[Any]:
        """Resolve a ``{"id": N}`` reference through ``manager``; no id means no reference."""
        if ref is None or ref.id is None:
            return None
        return manager.get_by_id(ref.id)

    @staticmethod
    def _require_text(value: Optional[str], field: str) -> str:
        if value is None or not str(value).strip():
            raise ValidationFailure(f"{field} is required", field=field)
        return value

    @staticmethod
    def _coerce_enum(enum_cls: Type[EnumT], value: Any, field: str) -> EnumT:
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_cls)
            raise ValidationFailure(
                f"Invalid {field} '{value}'; expected one of: {allowed}", field=field
            ) from None
