from datetime import datetime
from typing import Dict
from pydantic import BaseModel, ConfigDict

from taskboard.db.models.enums import EntityStatus
from .refs import Ref
from .users import User


class EntityBase(BaseModel):
    name: str
    description: str | None = None
    status: EntityStatus = EntityStatus.ACTIVE


class EntityCreate(EntityBase):
    owner: Ref | None = None


class EntityUpdate(EntityCreate):
    pass


class EntityStatusUpdate(BaseModel):
    status: EntityStatus


class Entity(EntityBase):
    id: int
    owner_id: int | None = None
    owner: User | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class EntityStats(BaseModel):
    total: int
    by_status: Dict[str, int]
