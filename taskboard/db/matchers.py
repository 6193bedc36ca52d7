"""
Composable field matchers for store lookups.

A matcher describes a predicate over one mapped model without binding to it;
``Store.find_by`` renders it into a SQLAlchemy filter clause. Matchers combine
with ``all_of``/``any_of`` or the ``&``/``|`` operators:

    store.find_by(eq("status", TaskStatus.DONE) & eq("priority", Priority.HIGH))
    store.find_by(contains("title", "docs") | contains("description", "docs"))
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple

from sqlalchemy import Integer, and_, func, or_, true
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


class _substring_position(FunctionElement):
    """1-based position of ``needle`` in ``haystack``, 0 when absent (case-sensitive)."""
    type = Integer()
    inherit_cache = True


@compiles(_substring_position)
def _compile_substring_position(element, compiler, **kw):
    return "strpos(%s)" % compiler.process(element.clauses, **kw)


@compiles(_substring_position, "sqlite")
def _compile_substring_position_sqlite(element, compiler, **kw):
    return "instr(%s)" % compiler.process(element.clauses, **kw)


def _plain(value: Any) -> Any:
    """Unwrap enum members to the stored string value."""
    return value.value if isinstance(value, Enum) else value


def _column(model, field: str):
    column = getattr(model, field, None)
    if column is None:
        raise AttributeError(f"{model.__name__} has no field '{field}'")
    return column


class Matcher:
    """Base class: subclasses implement ``clause(model)``."""

    def clause(self, model):  # pragma: no cover - abstract
        raise NotImplementedError

    def __and__(self, other: "Matcher") -> "AllOf":
        return all_of(self, other)

    def __or__(self, other: "Matcher") -> "AnyOf":
        return any_of(self, other)


@dataclass(frozen=True)
class Equals(Matcher):
    field: str
    value: Any
    case_sensitive: bool = True

    def clause(self, model):
        column = _column(model, self.field)
        value = _plain(self.value)
        if value is None:
            return column.is_(None)
        if not self.case_sensitive and isinstance(value, str):
            return func.lower(column) == value.lower()
        return column == value


@dataclass(frozen=True)
class Contains(Matcher):
    """Substring match.

    Case-insensitive matching lower-cases both sides and uses LIKE. The
    case-sensitive form compares positions with ``_substring_position``
    because SQLite's LIKE folds ASCII case.
    """
    field: str
    value: str
    case_sensitive: bool = False

    def clause(self, model):
        column = _column(model, self.field)
        if self.case_sensitive:
            return _substring_position(column, self.value) > 0
        return func.lower(column).contains(self.value.lower(), autoescape=True)


@dataclass(frozen=True)
class Between(Matcher):
    """Inclusive range; a missing bound leaves that side open."""
    field: str
    start: Any = None
    end: Any = None

    def clause(self, model):
        column = _column(model, self.field)
        parts = []
        if self.start is not None:
            parts.append(column >= self.start)
        if self.end is not None:
            parts.append(column <= self.end)
        return and_(*parts) if parts else true()


@dataclass(frozen=True)
class IsIn(Matcher):
    field: str
    values: Tuple[Any, ...]

    def clause(self, model):
        return _column(model, self.field).in_([_plain(v) for v in self.values])


@dataclass(frozen=True)
class AllOf(Matcher):
    matchers: Tuple[Matcher, ...]

    def clause(self, model):
        return and_(*(m.clause(model) for m in self.matchers))


@dataclass(frozen=True)
class AnyOf(Matcher):
    matchers: Tuple[Matcher, ...]

    def clause(self, model):
        return or_(*(m.clause(model) for m in self.matchers))


def eq(field: str, value: Any, *, case_sensitive: bool = True) -> Equals:
    return Equals(field, value, case_sensitive)


def contains(field: str, value: str, *, case_sensitive: bool = False) -> Contains:
    return Contains(field, value, case_sensitive)


def between(field: str, start: Any = None, end: Any = None) -> Between:
    return Between(field, start, end)


def is_in(field: str, values: Iterable[Any]) -> IsIn:
    return IsIn(field, tuple(values))


def all_of(*matchers: Matcher) -> AllOf:
    if not matchers:
        raise ValueError("all_of() needs at least one matcher")
    return AllOf(tuple(matchers))


def any_of(*matchers: Matcher) -> AnyOf:
    if not matchers:
        raise ValueError("any_of() needs at least one matcher")
    return AnyOf(tuple(matchers))
