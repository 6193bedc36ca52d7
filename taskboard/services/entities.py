"""
Entity manager: the generic template service.

Covers plain CRUD, status transitions, keyword and date-range search,
owner lookups, status statistics and validated bulk creation.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Dict, List, Optional, Sequence

from taskboard.db import models, schemas
from taskboard.db.models.enums import EntityStatus
from taskboard.db.repositories import EntityStore
from taskboard.errors import ValidationFailure
from .base import Manager
from .users import UserManager

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclass(frozen=True)
class EntityFilters:
    status: Optional[EntityStatus] = None
    name: Optional[str] = None


class EntityManager(Manager[models.Entity]):
    def __init__(self, store: EntityStore, users: UserManager):
        super().__init__(store)
        self.users = users

    # Filters

    def get_by_status(self, status) -> List[models.Entity]:
        return self.store.find_by_status(self._coerce_enum(EntityStatus, status, "status"))

    def get_by_status_and_name(self, status, name: str) -> List[models.Entity]:
        return self.store.find_by_status_and_name(self._coerce_enum(EntityStatus, status, "status"), name)

    def get_by_owner(self, user_id: int) -> List[models.Entity]:
        return self.store.find_by_owner(user_id)

    def search(self, keyword: str) -> List[models.Entity]:
        return self.store.search(keyword)

    def get_by_date_range(self, start: datetime, end: datetime) -> List[models.Entity]:
        """Rows created within ``[start, end]``; naive bounds are read as UTC."""
        start, end = _as_utc(start), _as_utc(end)
        if start > end:
            raise ValidationFailure("start_date must not be after end_date", field="start_date")
        return self.store.find_created_between(start, end)

    def get_recent(self, limit: int = 10) -> List[models.Entity]:
        return self.store.find_top_recent(limit)

    def list(self, filters: EntityFilters) -> List[models.Entity]:
        if filters.status is not None and filters.name:
            return self.get_by_status_and_name(filters.status, filters.name)
        if filters.status is not None:
            return self.get_by_status(filters.status)
        if filters.name:
            return self.store.find_by_name(filters.name)
        return self.get_all()

    def count_by_status(self, status) -> int:
        return self.store.count_by_status(self._coerce_enum(EntityStatus, status, "status"))

    def count_by_status_grouped(self) -> Dict[str, int]:
        counts = self.store.count_by_status_grouped()
        return {member.value: counts.get(member.value, 0) for member in EntityStatus}

    def stats(self) -> schemas.EntityStats:
        by_status = self.count_by_status_grouped()
        return schemas.EntityStats(total=sum(by_status.values()), by_status=by_status)

    # Writes

    def _assemble(self, payload: schemas.EntityCreate) -> dict:
        owner = self._resolve(self.users, payload.owner)
        return {
            "name": self._require_text(payload.name, "name"),
            "description": payload.description,
            "status": self._coerce_enum(EntityStatus, payload.status, "status").value,
            "owner_id": owner.id if owner is not None else None,
        }

    def create(self, payload: schemas.EntityCreate) -> models.Entity:
        entity = self.store.save(models.Entity(**self._assemble(payload)))
        logger.info("Created entity %s", entity.id)
        return entity

    def save_all(self, payloads: Sequence[schemas.EntityCreate]) -> List[models.Entity]:
        """Create every row or none: all payloads are validated before the first write."""
        rows = [models.Entity(**self._assemble(payload)) for payload in payloads]
        saved = self.store.save_all(rows)
        logger.info("Created %d entities in bulk", len(saved))
        return saved

    def update(self, entity_id: int, payload: schemas.EntityUpdate) -> models.Entity:
        entity = self._get_for_write(entity_id)
        for key, value in self._assemble(payload).items():
            setattr(entity, key, value)
        entity = self.store.save(entity)
        logger.info("Updated entity %s", entity.id)
        return entity

    def update_status(self, entity_id: int, status) -> models.Entity:
        entity = self._get_for_write(entity_id)
        entity.status = self._coerce_enum(EntityStatus, status, "status").value
        entity = self.store.save(entity)
        logger.info("Entity %s moved to %s", entity.id, entity.status)
        return entity
