"""
Entity store: the generic template resource and its catalogue of query
shapes (exact, ignore-case, AND/OR, substring, range, ordering, top-N,
exists, count and bulk delete).
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from taskboard.db import models
from taskboard.db.models.enums import EntityStatus
from taskboard.db.matchers import between, contains, eq
from .base import Store

_NEWEST_FIRST = (models.Entity.created_at.desc(), models.Entity.id.desc())


class EntityStore(Store[models.Entity]):
    model = models.Entity
    kind = "Entity"

    def find_by_name(self, name: str) -> List[models.Entity]:
        return self.find_by(eq("name", name))

    def find_by_name_ignore_case(self, name: str) -> Optional[models.Entity]:
        rows = self.find_by(eq("name", name, case_sensitive=False), limit=1)
        return rows[0] if rows else None

    def find_by_status(self, status: EntityStatus) -> List[models.Entity]:
        return self.find_by(eq("status", status))

    def find_by_status_and_name(self, status: EntityStatus, name: str) -> List[models.Entity]:
        return self.find_by(eq("status", status) & eq("name", name))

    def find_by_status_or_name(self, status: EntityStatus, name: str) -> List[models.Entity]:
        return self.find_by(eq("status", status) | eq("name", name))

    def find_by_name_containing(self, keyword: str, *, case_sensitive: bool = True) -> List[models.Entity]:
        return self.find_by(contains("name", keyword, case_sensitive=case_sensitive))

    def find_by_owner(self, user_id: int) -> List[models.Entity]:
        return self.find_by(eq("owner_id", user_id))

    def search(self, keyword: str) -> List[models.Entity]:
        return self.find_by(contains("name", keyword) | contains("description", keyword))

    def find_created_between(self, start: Optional[datetime], end: Optional[datetime]) -> List[models.Entity]:
        return self.find_by(between("created_at", start, end), order_by=(models.Entity.created_at, models.Entity.id))

    def find_all_newest_first(self) -> List[models.Entity]:
        return self.find_all(order_by=_NEWEST_FIRST)

    def find_top_recent(self, limit: int = 10) -> List[models.Entity]:
        return self._ordered(self._query(), _NEWEST_FIRST).limit(limit).all()

    def find_recent_by_status(self, status: EntityStatus, since: datetime) -> List[models.Entity]:
        return self.find_by(eq("status", status) & between("created_at", since, None), order_by=_NEWEST_FIRST)

    def exists_by_name(self, name: str) -> bool:
        return self.exists_by(eq("name", name))

    def count_by_status(self, status: EntityStatus) -> int:
        return self.count_by(eq("status", status))

    def count_by_status_grouped(self) -> dict:
        return self.count_grouped("status")

    def delete_by_status(self, status: EntityStatus) -> int:
        return self.delete_by(eq("status", status))

    def delete_created_before(self, cutoff: datetime) -> int:
        """Delete rows created at or before ``cutoff``; returns the count."""
        return self.delete_by(between("created_at", None, cutoff))
