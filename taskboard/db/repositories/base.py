"""
Generic SQLAlchemy store for one mapped model.

Lookups return rows or ``None``; only writes against an unknown id raise
``NotFound``. Every write commits its own transaction and rolls back on
any error before re-raising.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import ClassVar, Generic, Iterable, List, Optional, Tuple, TypeVar

from sqlalchemy import func, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.db.matchers import Matcher
from taskboard.errors import NotFound

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Store(Generic[ModelT]):
    """Persistence for one entity kind over a request-scoped ``Session``."""

    model: ClassVar[type]
    kind: ClassVar[str] = "Row"
    # Columns an update never copies from the incoming row
    immutable_fields: ClassVar[Tuple[str, ...]] = ("id", "created_at")

    def __init__(self, db: Session):
        self.db = db

    # Reads

    def _query(self):
        return self.db.query(self.model)

    def _ordered(self, q, order_by):
        if order_by is None:
            order_by = (self.model.id,)
        elif not isinstance(order_by, (list, tuple)):
            order_by = (order_by,)
        return q.order_by(*order_by)

    def find_all(self, order_by=None) -> List[ModelT]:
        return self._ordered(self._query(), order_by).all()

    def find_by_id(self, ident: int, *, lock: bool = False) -> Optional[ModelT]:
        if ident is None:
            return None
        q = self._query().filter(self.model.id == ident)
        if lock:
            # FOR UPDATE is dropped on SQLite, whose writes are serialized by the database lock
            q = q.with_for_update(of=self.model)
        return q.first()

    def find_by(self, matcher: Matcher, order_by=None, limit: Optional[int] = None) -> List[ModelT]:
        q = self._ordered(self._query().filter(matcher.clause(self.model)), order_by)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    def count_by(self, matcher: Optional[Matcher] = None) -> int:
        q = self.db.query(func.count(self.model.id))
        if matcher is not None:
            q = q.filter(matcher.clause(self.model))
        return int(q.scalar() or 0)

    def exists_by(self, matcher: Matcher) -> bool:
        return self.count_by(matcher) > 0

    def count_grouped(self, field: str) -> dict:
        column = getattr(self.model, field)
        rows = self.db.query(column, func.count(self.model.id)).group_by(column).all()
        return {value: int(count) for value, count in rows}

    # Writes

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            logger.warning("%s store write failed; rolling back", self.kind, exc_info=True)
            self.db.rollback()
            raise
        except BaseException:
            self.db.rollback()
            raise

    def _mutable_columns(self) -> List[str]:
        return [
            attr.key
            for attr in inspect(self.model).column_attrs
            if attr.key not in self.immutable_fields
        ]

    def _attach(self, row: ModelT) -> ModelT:
        """Return the session-bound row that ``row`` should be written to."""
        state = inspect(row)
        if state.persistent or state.pending:
            return row
        if row.id is None:
            self.db.add(row)
            return row
        existing = self.find_by_id(row.id, lock=True)
        if existing is None:
            raise NotFound(self.kind, row.id)
        for key in self._mutable_columns():
            setattr(existing, key, getattr(row, key))
        return existing

    def save(self, row: ModelT) -> ModelT:
        """Insert a row without an id, or replace the mutable fields of an existing one."""
        with self._transaction():
            target = self._attach(row)
        self.db.refresh(target)
        return target

    def save_all(self, rows: Iterable[ModelT]) -> List[ModelT]:
        with self._transaction():
            targets = [self._attach(row) for row in rows]
        for target in targets:
            self.db.refresh(target)
        return targets

    def delete_by_id(self, ident: int) -> None:
        with self._transaction():
            row = self.find_by_id(ident, lock=True)
            if row is None:
                raise NotFound(self.kind, ident)
            self.db.delete(row)

    def delete_by(self, matcher: Matcher) -> int:
        with self._transaction():
            count = (
                self._query()
                .filter(matcher.clause(self.model))
                .delete(synchronize_session=False)
            )
        return int(count)

