from datetime import datetime
from pydantic import BaseModel, ConfigDict

from .refs import Ref
from .users import User


class ProjectBase(BaseModel):
    name: str
    description: str | None = None


class ProjectCreate(ProjectBase):
    created_by: Ref | None = None


class ProjectUpdate(ProjectBase):
    pass


class Project(ProjectBase):
    id: int
    created_by_id: int | None = None
    created_by: User | None = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
